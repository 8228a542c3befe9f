from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8000
    root_path: str = ""

    reload: bool = False

    smtp_host: str = ""
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = Field("", validation_alias=AliasChoices("smtp_password", "smtp_pass"))
    smtp_from: str = ""
    smtp_tls: bool = False
    smtp_starttls: bool = True

    notification_recipients: list[str] = ["joseph@platteneye.co.uk", "daniel@platteneye.co.uk"]
    company_name: str = "Platteneye Capital"

    consultation_endpoint: str = "/api/submit-consultation"

    sentry_dsn: str | None = None
    sentry_environment: str = "test"


settings = Settings()
