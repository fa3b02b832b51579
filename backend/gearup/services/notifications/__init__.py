"""
Notifications module
Message selection and delivery for hydration reminders
"""
from .service import (
    NotificationService,
    HydrationNotification,
    pick_hydration_message,
    build_hydration_notification,
    format_notification_text
)

__all__ = [
    'NotificationService',
    'HydrationNotification',
    'pick_hydration_message',
    'build_hydration_notification',
    'format_notification_text'
]
