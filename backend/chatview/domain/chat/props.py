"""Props handed from the chat layout to the chat view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from chatview.domain.chat.data import ChatData


@dataclass(frozen=True, slots=True)
class ChatViewProps:
	data: Optional[ChatData]
	show_edit_group: Optional[str] = None
	show_group_users: Optional[str] = None
	ignore_focus: bool = False
	is_owner: bool = False
	is_edit_group: bool = False

	@classmethod
	def for_snapshot(
		cls,
		data: Optional[ChatData],
		*,
		show_edit_group: Optional[str] = None,
		show_group_users: Optional[str] = None,
		ignore_focus: bool = False,
	) -> "ChatViewProps":
		is_owner = data is not None and data.active_chat.creator == data.my_id.did_key
		is_edit_group = data is not None and show_edit_group == data.active_chat.id
		return cls(
			data=data,
			show_edit_group=show_edit_group,
			show_group_users=show_group_users,
			ignore_focus=ignore_focus,
			is_owner=is_owner,
			is_edit_group=is_edit_group,
		)

	@property
	def is_loading(self) -> bool:
		return self.data is None
