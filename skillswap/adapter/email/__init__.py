"""Email adapter."""

from .client import HttpEmailSender, LoggingEmailSender, MockEmailSender

__all__ = ["HttpEmailSender", "LoggingEmailSender", "MockEmailSender"]
