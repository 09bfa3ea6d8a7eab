"""Errors raised by application state mutators."""

from __future__ import annotations


class StateError(Exception):
	"""Base class for application state errors."""

	reason: str = "unknown"

	def __init__(self, reason: str | None = None) -> None:
		super().__init__(reason or self.reason)
		if reason:
			self.reason = reason


class UnknownChat(StateError):
	reason = "unknown_chat"


class UnknownIdentity(StateError):
	reason = "unknown_identity"


class SelfFriendship(StateError):
	reason = "self_friendship"
