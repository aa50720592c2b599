"""Constants and user-facing messages.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_API_PORT = 4000
DEFAULT_POOL_SIZE = 5

SUPPORTED_EXPORT_FORMATS = ("csv", "pdf")
REPORT_TITLE = "Daily Attendance Report"

MSG_HEALTH = "Welcome! The backend is running smoothly 🚀"
MSG_REGISTER_MISSING = "Please fill in all required fields to continue."
MSG_EMAIL_TAKEN = "This email is already registered. Try logging in."
MSG_LOGIN_MISSING = "Both email and PIN are required to log in."
MSG_USER_NOT_FOUND = "We couldn't find an account with that email."
MSG_WRONG_PIN = "Incorrect PIN. Please try again."
MSG_MARKED = "Attendance successfully marked. Have a great day! ✅"
MSG_ALREADY_MARKED = "You've already marked your attendance today. ✅"
MSG_NO_DATA = "No attendance has been recorded for today yet."
MSG_BAD_FORMAT = "Invalid export format. Please use ?format=csv or ?format=pdf"

MSG_REGISTER_FAILED = "Oops! Something went wrong on our side. Please try again later."
MSG_LOGIN_FAILED = "Something went wrong while marking your attendance. Please try again."
MSG_EXPORT_FAILED = "We encountered an error while exporting attendance. Please try again."
