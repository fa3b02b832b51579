"""
Application configuration and environment variables
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables"""

    # Record store
    DATA_DIR: str = os.getenv("GEARUP_DATA_DIR", "./data")

    # Local calendar used for "today" and minute-of-day
    TIMEZONE: str = os.getenv("GEARUP_TIMEZONE", "America/Los_Angeles")

    # Suppress reminder firings that land outside the active window
    ENFORCE_REMINDER_WINDOW: bool = _env_flag("GEARUP_ENFORCE_REMINDER_WINDOW", True)

    # WhatsApp / Twilio
    TWILIO_ACCOUNT_SID: str = os.getenv("TWILIO_ACCOUNT_SID", "")
    TWILIO_AUTH_TOKEN: str = os.getenv("TWILIO_AUTH_TOKEN", "")
    TWILIO_WHATSAPP_NUMBER: str = os.getenv("TWILIO_WHATSAPP_NUMBER", "")
    WHATSAPP_RECIPIENT: str = os.getenv("WHATSAPP_RECIPIENT", "")


# Create a global settings instance
settings = Settings()
