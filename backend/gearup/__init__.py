"""
GearUp - personal wellness backend (habits, mood journal, hydration reminders)
"""
__version__ = "0.1.0"
