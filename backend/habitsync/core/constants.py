"""
Application-wide constants
"""

# Habit list
MAX_HABITS = 15

# Status banner
STATUS_DISMISS_SECONDS = 3.0

# Notion database schema
PROPERTY_DATE = "Date"
PROPERTY_HABITS = "Habits"
PROPERTY_COMPLETED = "Completed"
PROPERTY_PROGRESS = "Progress"
PROPERTY_NOTES = "Notes"

# Notion rejects rich text objects longer than this
NOTION_TEXT_LIMIT = 2000

# Cross-origin headers added to every response
CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}
