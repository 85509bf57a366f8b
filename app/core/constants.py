"""
Fixed response bodies and log lines.

APP_NAME for the startup line is loaded from .env via Settings.
"""

# --- Controller responses (returned verbatim as text/plain) ---

HOME_MESSAGE: str = "✅ Backend is running successfully!"
HELLO_MESSAGE: str = "Hello from Event Management API!"

# --- Bootstrap (formatted with app_name) ---

STARTUP_MESSAGE: str = "{app_name} is running successfully!"
SHUTDOWN_MESSAGE: str = "{app_name} is shutting down."


def startup_message(app_name: str) -> str:
    """Return the line logged once the server is listening."""
    return STARTUP_MESSAGE.format(app_name=app_name)


def shutdown_message(app_name: str) -> str:
    return SHUTDOWN_MESSAGE.format(app_name=app_name)
