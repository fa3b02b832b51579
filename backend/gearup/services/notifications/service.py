"""
Notifications Service - Hydration reminder content and delivery
"""
import logging
import random
from typing import Callable, Optional

from pydantic import BaseModel

from gearup.core.constants import (
    HYDRATION_MESSAGES,
    HYDRATION_NOTIFICATION_TITLE,
    MARK_WATER_HABIT_ACTION,
)

logger = logging.getLogger(__name__)


# ============================================================================
# MESSAGE FORMATTING
# ============================================================================

class HydrationNotification(BaseModel):
    """A reminder ready to hand to a delivery channel"""
    title: str
    message: str
    action: str = MARK_WATER_HABIT_ACTION


def pick_hydration_message(rng: Optional[random.Random] = None) -> str:
    """Uniformly random message from the fixed pool"""
    return (rng or random).choice(HYDRATION_MESSAGES)


def build_hydration_notification(rng: Optional[random.Random] = None) -> HydrationNotification:
    return HydrationNotification(
        title=HYDRATION_NOTIFICATION_TITLE,
        message=pick_hydration_message(rng)
    )


def format_notification_text(notification: HydrationNotification) -> str:
    """Single text body for text-only channels"""
    return (
        f"💧 {notification.title}\n\n{notification.message}\n\n"
        f"Reply or tap 'Mark Water Habit' to log a glass."
    )


# ============================================================================
# NOTIFICATION SENDING
# ============================================================================

class NotificationService:
    """
    Service for sending notifications via a pluggable channel
    """

    def __init__(self, send_callback: Optional[Callable[[str], bool]] = None):
        """
        Initialize notification service

        Args:
            send_callback: Optional callback function for sending messages
                          Should have signature: callback(message: str) -> bool
        """
        self.send_callback = send_callback

    def send_notification(self, message: str) -> bool:
        """
        Send a notification message

        Args:
            message: The message to send

        Returns:
            True if sent successfully, False otherwise
        """
        if not self.send_callback:
            logger.info(f"No delivery channel configured - notification: {message}")
            return False

        try:
            result = self.send_callback(message)
            if result:
                logger.info("Notification sent successfully")
            else:
                logger.warning("Notification send callback returned False")
            return result
        except Exception as e:
            logger.error(f"Failed to send notification: {e}")
            return False

    def send_hydration_reminder(self, rng: Optional[random.Random] = None) -> HydrationNotification:
        """
        Build and deliver one hydration reminder

        Returns:
            The notification that was handed to the channel
        """
        notification = build_hydration_notification(rng)
        self.send_notification(format_notification_text(notification))
        return notification
