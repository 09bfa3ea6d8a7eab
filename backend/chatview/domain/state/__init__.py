"""Application state exports."""

from .exceptions import SelfFriendship, StateError, UnknownChat, UnknownIdentity
from .models import Chat, ConversationType, Identity, IdentityPlatform
from .store import ChatState, StateReader

__all__ = [
	"Chat",
	"ChatState",
	"ConversationType",
	"Identity",
	"IdentityPlatform",
	"SelfFriendship",
	"StateError",
	"StateReader",
	"UnknownChat",
	"UnknownIdentity",
]
