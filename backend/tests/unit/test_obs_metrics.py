import pytest

from chatview.domain.chat import ChatDataProjector
from chatview.domain.inputs import build_group_rename_validation, validate_input
from chatview.obs import metrics


def _projections(outcome):
    return metrics.PROJECTIONS.labels(outcome=outcome)._value.get()


def _rejections(reason):
    return metrics.INPUT_REJECTIONS.labels(reason=reason)._value.get()


def test_ready_projection_is_counted(state, direct_chat):
    before = _projections("ready")
    assert ChatDataProjector().project(state) is not None
    assert _projections("ready") == before + 1


@pytest.mark.parametrize("outcome", ["uninitialized", "no_active_chat"])
def test_not_ready_projection_is_counted(state, direct_chat, outcome):
    if outcome == "uninitialized":
        state.set_initialized(False)
    else:
        state.clear_active_chat()
    before = _projections(outcome)
    ready_before = _projections("ready")
    assert ChatDataProjector().project(state) is None
    assert _projections(outcome) == before + 1
    assert _projections("ready") == ready_before


def test_input_rejections_are_counted_once_per_reason():
    too_long = _rejections("too_long")
    not_alphanumeric = _rejections("not_alphanumeric")
    validate_input("#" * 70, build_group_rename_validation())
    assert _rejections("too_long") == too_long + 1
    assert _rejections("not_alphanumeric") == not_alphanumeric + 1


def test_accepted_input_is_not_counted():
    too_long = _rejections("too_long")
    assert validate_input("Weekend crew", build_group_rename_validation()) == []
    assert _rejections("too_long") == too_long
