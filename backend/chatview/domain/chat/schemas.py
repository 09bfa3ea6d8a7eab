"""Pydantic schemas for the serialised chat view payload."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from chatview.domain.chat.data import ChatData
from chatview.domain.chat.platform import Platform
from chatview.domain.state.models import ConversationType, Identity


class ParticipantView(BaseModel):
	model_config = ConfigDict(frozen=True)

	did_key: str
	username: str
	status_message: Optional[str] = None
	profile_picture: str = ""
	platform: Platform = Platform.UNKNOWN

	@classmethod
	def from_identity(cls, identity: Identity) -> "ParticipantView":
		return cls(
			did_key=identity.did_key,
			username=identity.username,
			status_message=identity.status_message,
			profile_picture=identity.profile_picture,
			platform=Platform.from_identity_platform(identity.platform),
		)


class ChatDataView(BaseModel):
	model_config = ConfigDict(frozen=True)

	chat_id: str
	conversation_type: ConversationType
	name: Optional[str] = None
	version: int
	my_id: ParticipantView
	active_participant: ParticipantView
	other_participants: List[ParticipantView]
	other_participants_names: str
	subtext: str
	is_favorite: bool
	first_image: str
	platform: Platform

	@classmethod
	def from_snapshot(cls, data: ChatData) -> "ChatDataView":
		return cls(
			chat_id=data.active_chat.id,
			conversation_type=data.active_chat.conversation_type,
			name=data.active_chat.name,
			version=data.version,
			my_id=ParticipantView.from_identity(data.my_id),
			active_participant=ParticipantView.from_identity(data.active_participant),
			other_participants=[ParticipantView.from_identity(identity) for identity in data.other_participants],
			other_participants_names=data.other_participants_names,
			subtext=data.subtext,
			is_favorite=data.is_favorite,
			first_image=data.first_image,
			platform=data.platform,
		)
