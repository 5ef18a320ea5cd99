"""Gmail REST API connector."""

from .connector import GmailConnector

__all__ = ["GmailConnector"]
