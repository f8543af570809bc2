"""Rule-based prose style linting."""

__version__ = "0.1.0"
