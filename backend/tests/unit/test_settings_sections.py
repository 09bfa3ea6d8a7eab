from chatview.domain.settings_sections import ExtensionSetting, SettingSection, SettingSectionSimple


def test_section_css_class():
    assert SettingSection("Theme", "Pick a theme").css_class == "settings-section disable-select"
    assert (
        SettingSection("Theme", "Pick a theme", no_border=True).css_class
        == "settings-section disable-select no-border"
    )


def test_section_control_visibility():
    assert SettingSection("Theme", "Pick a theme").shows_control
    assert not SettingSection("About", "Version info", has_children=False).shows_control
    assert not SettingSectionSimple(has_children=False).shows_control


def test_simple_section():
    section = SettingSectionSimple()
    assert section.css_class == "settings-section simple disable-select"
    assert section.aria_label == "settings-section"


def test_extension_card():
    card = ExtensionSetting(title="Emoji picker", author="satellite", description="Pick emoji")
    assert card.css_class == "extension-setting"
    assert card.aria_label == "extension-setting-element"
    assert card.icon == "beaker"
