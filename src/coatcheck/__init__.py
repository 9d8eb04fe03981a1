"""coatcheck — venue coat-check model with a notification-driven attendant."""

__version__ = "0.1.0"
