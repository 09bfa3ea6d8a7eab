"""Domain models for identities and chats held in application state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ConversationType(str, Enum):
	"""Kinds of conversation a chat can be."""

	DIRECT = "direct"
	GROUP = "group"


class IdentityPlatform(str, Enum):
	"""Platform an identity was last seen on, as reported by the network."""

	DESKTOP = "desktop"
	MOBILE = "mobile"
	WEB = "web"
	UNKNOWN = "unknown"

	@classmethod
	def parse(cls, value: object) -> "IdentityPlatform":
		try:
			return cls(str(value).lower())
		except ValueError:
			return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class Identity:
	"""A known participant."""

	did_key: str
	username: str
	status_message: Optional[str] = None
	profile_picture: str = ""
	platform: IdentityPlatform = IdentityPlatform.UNKNOWN

	@classmethod
	def from_record(cls, record: dict) -> "Identity":
		return cls(
			did_key=str(record["did_key"]),
			username=str(record["username"]),
			status_message=record.get("status_message") or None,
			profile_picture=str(record.get("profile_picture") or ""),
			platform=IdentityPlatform.parse(record.get("platform", "unknown")),
		)


@dataclass(frozen=True, slots=True)
class Chat:
	"""A conversation and its membership, in join order."""

	id: str
	conversation_type: ConversationType
	participants: Tuple[str, ...] = ()
	name: Optional[str] = None
	creator: Optional[str] = None

	@classmethod
	def direct(cls, chat_id: str, *participants: str) -> "Chat":
		return cls(id=chat_id, conversation_type=ConversationType.DIRECT, participants=tuple(participants))

	@classmethod
	def group(
		cls,
		chat_id: str,
		*participants: str,
		name: Optional[str] = None,
		creator: Optional[str] = None,
	) -> "Chat":
		return cls(
			id=chat_id,
			conversation_type=ConversationType.GROUP,
			participants=tuple(participants),
			name=name,
			creator=creator,
		)

	def is_direct(self) -> bool:
		return self.conversation_type == ConversationType.DIRECT

	def has_participant(self, did_key: str) -> bool:
		return did_key in self.participants
