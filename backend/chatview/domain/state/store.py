"""In-memory application state shared by every visible view.

The store is mutated by state-update handlers (network events, user actions)
and read by projections. Readers only go through :class:`StateReader`.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Set

from chatview.domain.state.exceptions import SelfFriendship, UnknownChat, UnknownIdentity
from chatview.domain.state.models import Chat, Identity
from chatview.settings import settings

logger = logging.getLogger(__name__)


class StateReader(Protocol):
	"""Read contract the chat projection depends on."""

	def is_initialized(self) -> bool:
		...

	def get_active_chat(self) -> Optional[Chat]:
		...

	def chat_participants(self, chat: Chat) -> Sequence[Identity]:
		...

	def remove_self(self, identities: Iterable[Identity]) -> List[Identity]:
		...

	def get_own_identity(self) -> Identity:
		...

	def is_favorite(self, chat: Chat) -> bool:
		...

	def join_usernames(self, identities: Iterable[Identity]) -> str:
		...


class ChatState:
	"""Application state: identities, chats, favorites and friendships."""

	def __init__(self, own_identity: Identity, *, username_separator: Optional[str] = None) -> None:
		self.initialized = False
		self.username_separator = settings.username_separator if username_separator is None else username_separator
		self._own_did = own_identity.did_key
		self._identities: Dict[str, Identity] = {own_identity.did_key: own_identity}
		self._chats: Dict[str, Chat] = {}
		self._active_chat_id: Optional[str] = None
		self._favorites: List[str] = []
		self._friends: Set[str] = set()

	# Reads

	def is_initialized(self) -> bool:
		return self.initialized

	def get_identity(self, did_key: str) -> Optional[Identity]:
		return self._identities.get(did_key)

	def get_own_identity(self) -> Identity:
		return self._identities[self._own_did]

	def get_chat(self, chat_id: str) -> Optional[Chat]:
		return self._chats.get(chat_id)

	def get_active_chat(self) -> Optional[Chat]:
		if self._active_chat_id is None:
			return None
		return self._chats.get(self._active_chat_id)

	def chat_participants(self, chat: Chat) -> List[Identity]:
		"""Resolve a chat's members to identities, skipping ids not known yet."""
		participants: List[Identity] = []
		for did_key in chat.participants:
			identity = self._identities.get(did_key)
			if identity is not None:
				participants.append(identity)
		return participants

	def remove_self(self, identities: Iterable[Identity]) -> List[Identity]:
		return [identity for identity in identities if identity.did_key != self._own_did]

	def is_favorite(self, chat: Chat) -> bool:
		return chat.id in self._favorites

	def favorites(self) -> List[Chat]:
		return [self._chats[chat_id] for chat_id in self._favorites if chat_id in self._chats]

	def join_usernames(self, identities: Iterable[Identity]) -> str:
		return self.username_separator.join(identity.username for identity in identities)

	def is_friend(self, did_key: str) -> bool:
		return did_key in self._friends

	def friends(self) -> List[Identity]:
		return sorted(
			(self._identities[did_key] for did_key in self._friends if did_key in self._identities),
			key=lambda identity: identity.username.lower(),
		)

	# Mutations

	def set_initialized(self, value: bool = True) -> None:
		self.initialized = value

	def upsert_identity(self, identity: Identity) -> None:
		# Identities are replaced, never edited, so snapshots keep the values they copied.
		self._identities[identity.did_key] = identity

	def upsert_chat(self, chat: Chat) -> None:
		self._chats[chat.id] = chat

	def remove_chat(self, chat_id: str) -> None:
		if chat_id not in self._chats:
			raise UnknownChat()
		del self._chats[chat_id]
		if chat_id in self._favorites:
			self._favorites.remove(chat_id)
		if self._active_chat_id == chat_id:
			self._active_chat_id = None

	def set_active_chat(self, chat_id: str) -> None:
		if chat_id not in self._chats:
			raise UnknownChat()
		self._active_chat_id = chat_id
		logger.debug("active chat changed", extra={"active_chat": chat_id})

	def clear_active_chat(self) -> None:
		self._active_chat_id = None

	def toggle_favorite(self, chat_id: str) -> bool:
		"""Flip the favorite flag of a chat and return the new value."""
		if chat_id not in self._chats:
			raise UnknownChat()
		if chat_id in self._favorites:
			self._favorites.remove(chat_id)
			return False
		self._favorites.append(chat_id)
		return True

	def add_friend(self, did_key: str) -> None:
		if did_key == self._own_did:
			raise SelfFriendship()
		if did_key not in self._identities:
			raise UnknownIdentity()
		self._friends.add(did_key)

	def remove_friend(self, did_key: str) -> None:
		if did_key not in self._friends:
			raise UnknownIdentity("not_friend")
		self._friends.discard(did_key)
		logger.debug("friend removed", extra={"friend": did_key})
