from dataclasses import dataclass
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


@dataclass(frozen=True)
class EventDetails:
    """Read-only event information rendered into the notification emails."""

    date: str
    time: str
    venue: str
    attire_male: str
    attire_female: str
    location: str
    map_link: str

    def attire_for(self, gender: str) -> str:
        # Only "male" is special cased, every other value gets the female attire
        return self.attire_male if gender == "male" else self.attire_female


class Settings(BaseSettings):
    # App
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = True
    cors_origins: list[str] = ["*"]

    ENVIRONMENT: str = "Production"

    # Event
    event_date: str = "Sunday, April 15, 2024"
    event_time: str = "12:00 Noon"
    event_venue: str = "Yellow Chilling Restaurant"
    event_attire_male: str = "Native Attire with Cap"
    event_attire_female: str = "Rich Aunty Attire"
    event_location: str = "Yellow Chilling Restaurant"
    event_map_link: str = "https://maps.google.com/?q=Yellow+Chilling+Restaurant"

    # Email addresses
    email_from: str = "birthday.party.rsvp@example.com"
    email_admin: str = "organizer@example.com"

    # Email (SMTP)
    smtp_host: str = "smtp.example.com"
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_pass: str = ""

    # Email (Resend) - if set, use Resend API instead of SMTP
    resend_api_key: str = ""

    # Google Sheets (optional)
    google_sheets_id: str = ""
    google_sheets_range: str = "A1"
    google_service_account_email: str = ""
    google_private_key: str = ""
    log_to_spreadsheet: bool = False

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True

    @field_validator("google_private_key", mode="before")
    @classmethod
    def unescape_private_key(cls, v: str) -> str:
        # Keys pasted into .env files usually carry literal "\n" sequences
        return v.replace("\\n", "\n") if isinstance(v, str) else v

    @property
    def event_details(self) -> EventDetails:
        return EventDetails(
            date=self.event_date,
            time=self.event_time,
            venue=self.event_venue,
            attire_male=self.event_attire_male,
            attire_female=self.event_attire_female,
            location=self.event_location,
            map_link=self.event_map_link,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
