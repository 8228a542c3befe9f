from _pytest.monkeypatch import MonkeyPatch

from consultation.settings import Settings


def test__defaults(monkeypatch: MonkeyPatch) -> None:
    for name in ["SMTP_PORT", "NOTIFICATION_RECIPIENTS", "COMPANY_NAME"]:
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.smtp_port == 587
    assert settings.notification_recipients == ["joseph@platteneye.co.uk", "daniel@platteneye.co.uk"]
    assert settings.company_name == "Platteneye Capital"
    assert settings.consultation_endpoint == "/api/submit-consultation"


def test__environment(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("SMTP_HOST", "mail.example.com")
    monkeypatch.setenv("SMTP_PORT", "465")
    monkeypatch.setenv("SMTP_PASS", "secret")
    monkeypatch.setenv("NOTIFICATION_RECIPIENTS", '["team@example.com"]')

    settings = Settings()

    assert settings.smtp_host == "mail.example.com"
    assert settings.smtp_port == 465
    assert settings.smtp_password == "secret"
    assert settings.notification_recipients == ["team@example.com"]


def test__only_used_options() -> None:
    assert "debug" not in Settings.model_fields
    assert Settings.model_config.get("env_nested_delimiter") is None
