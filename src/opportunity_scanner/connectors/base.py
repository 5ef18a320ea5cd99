"""Abstract base class for message source connectors."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from opportunity_scanner.models.message import RawMessage

logger = logging.getLogger(__name__)

DEFAULT_QUERY = "newer_than:30d"


class TransportError(RuntimeError):
    """The message source could not be reached or answered with an error."""


class BaseConnector(ABC):
    """
    Standard interface for message sources.
    Connectors list recent message IDs, fetch payloads, and map them to RawMessage.
    """

    source_id: str = ""

    @abstractmethod
    def list_message_ids(self, max_results: int = 50, query: Optional[str] = DEFAULT_QUERY) -> list[str]:
        """
        IDs of recent messages, newest first, at most max_results.
        """
        pass

    @abstractmethod
    def fetch_message(self, message_id: str) -> dict[str, Any]:
        """
        Full provider payload for one message.
        """
        pass

    @abstractmethod
    def to_raw_message(self, payload: dict[str, Any]) -> RawMessage:
        """
        Convert a provider payload to RawMessage.
        """
        pass

    def fetch_recent(
        self,
        max_results: int = 50,
        fetch_limit: int = 20,
        query: Optional[str] = DEFAULT_QUERY,
    ) -> list[RawMessage]:
        """
        List recent IDs, fetch at most fetch_limit payloads, and map them.
        Payloads that cannot be mapped are logged and left out.
        """
        ids = self.list_message_ids(max_results=max_results, query=query)
        messages: list[RawMessage] = []
        for message_id in ids[:fetch_limit]:
            payload = self.fetch_message(message_id)
            try:
                messages.append(self.to_raw_message(payload))
            except ValueError as e:
                logger.warning("Could not map message %s: %s", message_id, e)
        return messages
