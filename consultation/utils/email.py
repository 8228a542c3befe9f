from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Any

import aiosmtplib

from ..logger import get_logger
from ..settings import Settings
from .templates import env


logger = get_logger(__name__)


@dataclass(frozen=True)
class SMTPTransport:
    """Connection parameters for the outgoing mail server, shared by all requests of a process."""

    hostname: str
    port: int
    username: str | None
    password: str | None
    sender: str
    use_tls: bool = False
    start_tls: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "SMTPTransport":
        return cls(
            hostname=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_user or None,
            password=settings.smtp_password or None,
            sender=settings.smtp_from,
            use_tls=settings.smtp_tls,
            start_tls=settings.smtp_starttls,
        )

    async def send(self, recipient: str, subject: str, text: str, html: str) -> None:
        logger.debug(f"Sending email to {recipient} ({subject})")

        message = MIMEMultipart("alternative")
        message["From"] = self.sender
        message["To"] = recipient
        message["Subject"] = " ".join(subject.splitlines())
        message.attach(MIMEText(text, "plain", "utf-8"))
        message.attach(MIMEText(html, "html", "utf-8"))

        await aiosmtplib.send(
            message,
            hostname=self.hostname,
            port=self.port,
            username=self.username,
            password=self.password,
            use_tls=self.use_tls,
            start_tls=self.start_tls,
        )


@dataclass
class Message:
    title: str
    template: str

    def subject(self, **kwargs: Any) -> str:
        return self.title.format(**kwargs)

    def render(self, **kwargs: Any) -> tuple[str, str]:
        text = env.get_template(f"{self.template}.txt").render(**kwargs)
        html = env.get_template(f"{self.template}.html").render(**kwargs)
        return text, html

    async def send(self, transport: SMTPTransport, recipient: str, **kwargs: Any) -> None:
        text, html = self.render(**kwargs)
        await transport.send(recipient, self.subject(**kwargs), text, html)


NEW_CONSULTATION = Message(title="New Consultation Request from {name}", template="new_consultation")
CONSULTATION_RECEIVED = Message(title="Consultation Request Received - {company}", template="consultation_received")
