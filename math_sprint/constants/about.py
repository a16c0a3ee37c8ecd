"""Static metadata describing Math Sprint."""

APP_NAME = "Math Sprint"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "**Math Sprint** is a single-screen arithmetic timing game built with Qt.\n\n"
    "You start with 30 seconds on the clock. Every correct answer scores a point "
    "and adds a second; wrong answers show the right result and move on. "
    "Your best score is kept until the application closes."
)
