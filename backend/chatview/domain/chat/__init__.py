"""Chat view-state exports."""

from .data import ChatData, ChatDataProjector, get_chat_data, needs_render
from .platform import Platform
from .props import ChatViewProps

__all__ = [
	"ChatData",
	"ChatDataProjector",
	"ChatViewProps",
	"Platform",
	"get_chat_data",
	"needs_render",
]
