"""
Application constants - store keys, defaults and fixed message tables
"""

# Record store keys
KEY_HABITS = "habits"
KEY_HABIT_PROGRESS = "habit_progress"
KEY_MOOD_ENTRIES = "mood_entries"
KEY_SETTINGS = "settings"

# Reminder settings defaults
DEFAULT_REMINDERS_ENABLED = True
DEFAULT_REMINDER_INTERVAL_MINUTES = 60
DEFAULT_REMINDER_START_MINUTE = 8 * 60
DEFAULT_REMINDER_END_MINUTE = 22 * 60
DEFAULT_FIRST_LAUNCH = True

MINUTES_PER_DAY = 24 * 60

# Unique name of the recurring hydration reminder job
HYDRATION_REMINDER_JOB_ID = "hydration_reminder_work"

# Canonical date/time formats
DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DISPLAY_TIME_FORMAT = "%H:%M"
DISPLAY_DATE_FORMAT = "%b %d"
UNKNOWN_DISPLAY = "Unknown"
REMINDERS_DISABLED_DISPLAY = "Reminders disabled"

# Water habit lookup (used by the notification "mark water habit" action)
WATER_HABIT_ICON = "💧"
WATER_HABIT_NAME = "Drink Water"

# (name, description, target, unit, icon)
DEFAULT_HABITS = [
    ("Drink Water", "Stay hydrated throughout the day", 8, "glasses", "💧"),
    ("Exercise", "Daily physical activity", 30, "minutes", "🏃"),
    ("Meditation", "Mindfulness and relaxation", 15, "minutes", "🧘"),
    ("Reading", "Learn something new", 30, "minutes", "📚"),
    ("Sleep", "Get quality rest", 8, "hours", "😴"),
]

HYDRATION_NOTIFICATION_TITLE = "Hydration Reminder"
MARK_WATER_HABIT_ACTION = "mark_water_habit"

HYDRATION_MESSAGES = [
    "Time to hydrate! 💧 Your body will thank you!",
    "Drink up! 🥤 Stay refreshed and energized!",
    "Hydration check! 💦 Keep that water flowing!",
    "Your daily H2O reminder! 🌊 Sip sip hooray!",
    "Water break time! 💧 Stay healthy, stay hydrated!",
    "Thirsty? 🥛 Time for some refreshing water!",
    "Hydration station! 💦 Fuel your body with water!",
    "Drop what you're doing! 💧 It's water time!",
    "Stay cool, stay hydrated! 🧊 Drink some water!",
    "Water you waiting for? 💧 Time to hydrate!",
]

# Ordered (threshold, message); first threshold <= percentage wins
MOTIVATIONAL_TIERS = [
    (100, "🎉 Perfect day! All habits completed!"),
    (80, "🌟 Excellent progress! Keep it up!"),
    (60, "💪 Good work! You're on track!"),
    (40, "📈 Making progress! Don't give up!"),
    (20, "🚀 Getting started! Every step counts!"),
]
MOTIVATIONAL_FALLBACK = "🌱 New day, new opportunities!"

# Ordered (threshold, hex color) for the widget progress ring
PROGRESS_COLORS = [
    (80, "#4CAF50"),
    (60, "#8EFF00"),
    (40, "#FF9800"),
    (20, "#FFC107"),
]
PROGRESS_COLOR_FALLBACK = "#F44336"

# Number of recent entries included in a shared mood summary
MOOD_SUMMARY_ENTRIES = 7
