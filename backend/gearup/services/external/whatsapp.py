"""
WhatsApp Service - Twilio messaging for reminder delivery
"""
import logging
from twilio.rest import Client

from gearup.core.config import settings
from gearup.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

# Initialize Twilio client if credentials are available
twilio_client = None
if settings.TWILIO_ACCOUNT_SID and settings.TWILIO_AUTH_TOKEN:
    twilio_client = Client(settings.TWILIO_ACCOUNT_SID, settings.TWILIO_AUTH_TOKEN)
    logger.info("Twilio client initialized successfully")
else:
    logger.info("Twilio credentials not found. Reminders will only be logged.")


def is_twilio_configured() -> bool:
    """Check if Twilio client and recipient are configured"""
    return twilio_client is not None and bool(settings.WHATSAPP_RECIPIENT)


def send_whatsapp_message(to_number: str, message: str) -> str:
    """
    Send a WhatsApp message via Twilio

    Args:
        to_number: Recipient WhatsApp number (e.g., "whatsapp:+13128856151")
        message: Message text to send

    Returns:
        Message SID from Twilio

    Raises:
        ExternalServiceError: If Twilio client not configured or send fails
    """
    if not twilio_client:
        raise ExternalServiceError("Twilio client not configured")

    logger.info(f"[TWILIO] Sending message to {to_number}")
    try:
        twilio_message = twilio_client.messages.create(
            from_=settings.TWILIO_WHATSAPP_NUMBER or "whatsapp:+14155238886",
            body=message,
            to=to_number
        )
    except Exception as e:
        logger.error(f"[TWILIO] Send failed: {e}")
        raise ExternalServiceError(f"Failed to send WhatsApp message: {e}")

    logger.info(f"[TWILIO] Message sent with SID: {twilio_message.sid}")
    return twilio_message.sid


def send_to_recipient(message: str) -> bool:
    """
    Send a message to the configured WHATSAPP_RECIPIENT.
    Signature matches NotificationService's send callback.
    """
    if not is_twilio_configured():
        logger.warning("Cannot send WhatsApp message - Twilio client or recipient not configured")
        return False

    send_whatsapp_message(settings.WHATSAPP_RECIPIENT, message)
    return True
