"""Source connectors that hand raw messages to the classifier."""

from opportunity_scanner.connectors.base import BaseConnector, TransportError
from opportunity_scanner.connectors.registry import ConnectorRegistry

__all__ = ["BaseConnector", "ConnectorRegistry", "TransportError"]
