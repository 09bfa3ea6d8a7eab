from chatview.settings import Settings


def test_defaults(monkeypatch):
    for name in ("USERNAME_SEPARATOR", "LOG_LEVEL", "ENV", "APP_ENV", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.username_separator == ", "
    assert cfg.obs_log_level == "INFO"
    assert cfg.is_prod()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("USERNAME_SEPARATOR", " / ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("APP_ENV", "dev")
    monkeypatch.setenv("LOG_SAMPLING_RATE_INFO", "4")
    cfg = Settings(_env_file=None)
    assert cfg.username_separator == " / "
    assert cfg.obs_log_level == "DEBUG"
    assert cfg.is_dev()
    assert cfg.obs_log_sampling_rate_info == 1.0
