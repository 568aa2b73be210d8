import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Protocol

from src.email_service.base import MailTransport


class SMTPConfig(Protocol):
    smtp_host: str
    smtp_port: int
    smtp_user: str
    smtp_pass: str


class SMTPMailTransport(MailTransport):
    def __init__(self, config: SMTPConfig, smtp_class: type[smtplib.SMTP] = smtplib.SMTP):
        self.host = config.smtp_host
        self.port = config.smtp_port
        self.username = config.smtp_user
        self.password = config.smtp_pass
        self._smtp_class = smtp_class

    def _create_message(
        self,
        from_address: str,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str | None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = from_address
        msg["To"] = to_address

        if text_body:
            msg.attach(MIMEText(text_body, "plain"))
        msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send(self, msg: MIMEMultipart) -> None:
        # One connection per message, nothing is pooled
        with self._smtp_class(self.host, self.port) as server:
            if self.username and self.password:
                server.starttls()
                server.login(self.username, self.password)
            server.send_message(msg)

    async def send(
        self,
        from_address: str,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> None:
        msg = self._create_message(
            from_address=from_address,
            to_address=to_address,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
        )
        await asyncio.to_thread(self._send, msg)
