from abc import ABC, abstractmethod


class MailTransport(ABC):
    """Delivers a single email. Implementations raise on any delivery failure."""

    @abstractmethod
    async def send(
        self,
        from_address: str,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> None:
        pass
