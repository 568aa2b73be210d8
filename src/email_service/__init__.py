from src.config.settings import Settings, settings
from src.email_service.base import MailTransport
from src.email_service.resend_service import ResendMailTransport
from src.email_service.smtp_service import SMTPMailTransport


def get_mail_transport(config: Settings = settings) -> MailTransport:
    if config.resend_api_key:
        return ResendMailTransport(config=config)
    return SMTPMailTransport(config=config)


__all__ = [
    "MailTransport",
    "ResendMailTransport",
    "SMTPMailTransport",
    "get_mail_transport",
]
