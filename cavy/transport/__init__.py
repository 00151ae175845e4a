"""Transport module - HTTP communication with cavy-cli."""

from .http_client import PROBE_RESPONSE, CollectorHttpClient

__all__ = [
    "PROBE_RESPONSE",
    "CollectorHttpClient",
]
