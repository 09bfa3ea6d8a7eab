"""Render-ready snapshot of the active chat.

A :class:`ChatData` is rebuilt from application state on every read. Each
snapshot is stamped with a new version and never compares equal to another
snapshot, so the view re-renders whenever a projection runs, even when the
derived fields did not change.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from chatview.domain.chat.platform import Platform
from chatview.domain.state.models import Chat, Identity
from chatview.domain.state.store import StateReader
from chatview.obs import logging as obs_logging
from chatview.obs import metrics as obs_metrics

logger = logging.getLogger(__name__)

OUTCOME_READY = "ready"
OUTCOME_UNINITIALIZED = "uninitialized"
OUTCOME_NO_ACTIVE_CHAT = "no_active_chat"


@dataclass(frozen=True, slots=True, eq=False)
class ChatData:
	"""Snapshot of the active chat for one render pass.

	``eq=False`` keeps comparison by identity: two snapshots are never equal,
	whatever their fields hold.
	"""

	active_chat: Chat
	my_id: Identity
	other_participants: Tuple[Identity, ...]
	active_participant: Identity
	subtext: str
	is_favorite: bool
	first_image: str
	other_participants_names: str
	platform: Platform
	version: int

	@property
	def is_direct(self) -> bool:
		return self.active_chat.is_direct()


class ChatDataProjector:
	"""Derives :class:`ChatData` from application state."""

	def __init__(self, start_version: int = 1) -> None:
		self._versions: Iterator[int] = itertools.count(start_version)

	def project(self, state: StateReader) -> Optional[ChatData]:
		# The compose view shouldn't render before chats are loaded, check anyway.
		if not state.is_initialized():
			return self._not_ready(OUTCOME_UNINITIALIZED)

		active_chat = state.get_active_chat()
		if active_chat is None:
			return self._not_ready(OUTCOME_NO_ACTIVE_CHAT)

		participants = state.chat_participants(active_chat)
		# A friend's rename reaches state.identities before the chat list is
		# resynced, so an old username can show until the next full sync.
		other_participants = tuple(state.remove_self(participants))
		my_id = state.get_own_identity()
		active_participant = other_participants[0] if other_participants else my_id

		if active_chat.is_direct():
			subtext = active_participant.status_message or ""
		else:
			subtext = ""

		data = ChatData(
			active_chat=active_chat,
			my_id=my_id,
			other_participants=other_participants,
			active_participant=active_participant,
			subtext=subtext,
			is_favorite=state.is_favorite(active_chat),
			first_image=active_participant.profile_picture,
			other_participants_names=state.join_usernames(other_participants),
			platform=Platform.from_identity_platform(active_participant.platform),
			version=next(self._versions),
		)
		obs_metrics.inc_projection(OUTCOME_READY)
		tokens = obs_logging.bind_context(chat_id=active_chat.id, user_id=my_id.did_key)
		try:
			logger.debug("chat projected", extra={"version": data.version, "others": len(other_participants)})
		finally:
			obs_logging.reset_context(tokens)
		return data

	def _not_ready(self, outcome: str) -> None:
		obs_metrics.inc_projection(outcome)
		logger.debug("chat projection not ready", extra={"outcome": outcome})
		return None


_default_projector = ChatDataProjector()


def get_chat_data(state: StateReader) -> Optional[ChatData]:
	"""Project the active chat using the process-wide projector."""
	return _default_projector.project(state)


def needs_render(previous: Optional[ChatData], current: Optional[ChatData]) -> bool:
	"""Return True when the view must re-render for ``current``.

	Any new snapshot version counts as a change; only re-presenting the very
	same snapshot (or staying without one) is a no-op.
	"""
	return previous is not current
