"""Presentation-side platform indicator."""

from __future__ import annotations

from enum import Enum

from chatview.domain.state.models import IdentityPlatform


class Platform(str, Enum):
	"""Platform badge drawn next to a participant's avatar."""

	DESKTOP = "desktop"
	MOBILE = "mobile"
	WEB = "web"
	UNKNOWN = "unknown"

	@classmethod
	def from_identity_platform(cls, platform: IdentityPlatform) -> "Platform":
		return _FROM_IDENTITY.get(platform, cls.UNKNOWN)


_FROM_IDENTITY: dict[IdentityPlatform, Platform] = {
	IdentityPlatform.DESKTOP: Platform.DESKTOP,
	IdentityPlatform.MOBILE: Platform.MOBILE,
	IdentityPlatform.WEB: Platform.WEB,
	IdentityPlatform.UNKNOWN: Platform.UNKNOWN,
}
