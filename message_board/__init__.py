"""Data-access layer for the message board sample application."""

__version__ = "0.1.0"
