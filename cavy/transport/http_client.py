"""HTTP client for talking to the cavy-cli report collector.

Implements the collector protocol:
- GET /        - Probe; a running collector answers "cavy-cli running"
- POST /report - Deliver a test report as JSON
"""

from typing import Any

import requests

from ..config import DEFAULT_COLLECTOR_URL

PROBE_RESPONSE = "cavy-cli running"


class CollectorHttpClient:
    """HTTP client for the local cavy-cli collector.

    Requests are sent once; there is no retry.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_COLLECTOR_URL,
        probe_timeout: float = 2.0,
        send_timeout: float = 10.0,
    ):
        """Initialize HTTP client.

        Args:
            base_url: Base URL of the collector (e.g., http://127.0.0.1:8082).
            probe_timeout: Timeout for the probe request in seconds.
            send_timeout: Timeout for the report POST in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.probe_timeout = probe_timeout
        self.send_timeout = send_timeout
        self._session = requests.Session()
        # The collector runs locally; never route through an env proxy.
        self._session.trust_env = False

    @property
    def probe_url(self) -> str:
        return f"{self.base_url}/"

    @property
    def report_url(self) -> str:
        return f"{self.base_url}/report"

    def probe(self) -> str:
        """Fetch the collector's status text.

        GET /

        Returns:
            Response body as text.

        Raises:
            requests.ConnectionError: If the collector is unreachable.
            requests.Timeout: If the collector doesn't answer in time.
        """
        response = self._session.get(self.probe_url, timeout=self.probe_timeout)
        return response.text

    def post_report(self, payload: dict[str, Any]) -> requests.Response:
        """Send a serialized report.

        POST /report

        Args:
            payload: Report wire data.

        Returns:
            Response object.

        Raises:
            requests.HTTPError: On 4xx/5xx responses.
            requests.ConnectionError: If the collector is unreachable.
        """
        response = self._session.post(
            self.report_url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=self.send_timeout,
        )
        response.raise_for_status()
        return response

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
