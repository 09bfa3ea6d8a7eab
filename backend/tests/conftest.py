import sys
from pathlib import Path

import pytest

# Ensure backend package is importable when tests run from repo root
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
	sys.path.insert(0, str(BACKEND_ROOT))

from chatview.domain.state import Chat, ChatState, Identity, IdentityPlatform


@pytest.fixture
def me():
	return Identity(did_key="did:key:self", username="Self", status_message="Here", platform=IdentityPlatform.DESKTOP)


@pytest.fixture
def bob():
	return Identity(
		did_key="did:key:bob",
		username="Bob",
		status_message="Away",
		profile_picture="bob.png",
		platform=IdentityPlatform.MOBILE,
	)


@pytest.fixture
def carol():
	return Identity(did_key="did:key:carol", username="Carol", profile_picture="carol.png", platform=IdentityPlatform.WEB)


@pytest.fixture
def state(me, bob, carol):
	"""Initialized state knowing Self, Bob and Carol, with no chats yet."""
	chat_state = ChatState(me, username_separator=", ")
	chat_state.upsert_identity(bob)
	chat_state.upsert_identity(carol)
	chat_state.set_initialized()
	return chat_state


@pytest.fixture
def direct_chat(state, me, bob):
	chat = Chat.direct("chat-direct", me.did_key, bob.did_key)
	state.upsert_chat(chat)
	state.set_active_chat(chat.id)
	return chat


@pytest.fixture
def group_chat(state, me, bob, carol):
	chat = Chat.group("chat-group", me.did_key, bob.did_key, carol.did_key, name="Weekend", creator=me.did_key)
	state.upsert_chat(chat)
	state.set_active_chat(chat.id)
	return chat
