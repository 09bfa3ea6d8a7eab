"""Settings page descriptors."""

from .models import ExtensionSetting, SettingSection, SettingSectionSimple

__all__ = ["ExtensionSetting", "SettingSection", "SettingSectionSimple"]
