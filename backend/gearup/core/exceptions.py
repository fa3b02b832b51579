"""
Custom Exceptions - Application-specific error types
"""


class GearUpException(Exception):
    """Base exception for all GearUp errors"""
    pass


class HabitNotFoundError(GearUpException):
    """Raised when a habit cannot be found"""
    pass


class InvalidHabitDataError(GearUpException):
    """Raised when habit input fails validation (empty name/unit, target <= 0)"""
    pass


class InvalidMoodDataError(GearUpException):
    """Raised when a mood entry cannot be saved (unknown or missing mood)"""
    pass


class InvalidReminderSettingsError(GearUpException):
    """Raised when reminder settings are out of range"""
    pass


class StorageError(GearUpException):
    """Raised when the record store cannot persist a collection"""
    pass


class SchedulerError(GearUpException):
    """Raised when scheduler operations fail"""
    pass


class ExternalServiceError(GearUpException):
    """Raised when external services (Twilio) fail"""
    pass
