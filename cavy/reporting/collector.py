"""Delivers finished reports to a cavy-cli collector.

Reporting is best-effort: every failure here is logged and swallowed so it
can never be mistaken for a test failure.
"""

import asyncio
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import requests

from ..config import RunnerConfig
from ..transport.http_client import PROBE_RESPONSE, CollectorHttpClient
from .json_reporter import Report

logger = logging.getLogger(__name__)


class CollectorReporter:
    """Probes for a local collector and sends it the run report."""

    def __init__(
        self,
        client: Optional[CollectorHttpClient] = None,
        config: Optional[RunnerConfig] = None,
    ):
        """Initialize reporter.

        Args:
            client: HTTP client to use; the caller keeps ownership of it.
                When omitted, a client is built from ``config`` for each
                delivery and closed afterwards.
            config: Runner configuration (collector URL and timeouts).
        """
        self.config = config or RunnerConfig()
        self.client = client

    def build_client(self) -> CollectorHttpClient:
        """Create a client for the configured collector."""
        return CollectorHttpClient(
            base_url=self.config.collector_url,
            probe_timeout=self.config.probe_timeout,
            send_timeout=self.config.send_timeout,
        )

    @contextmanager
    def _client_scope(self) -> Iterator[CollectorHttpClient]:
        if self.client is not None:
            yield self.client
            return
        with self.build_client() as client:
            yield client

    async def probe_and_send(self, report: Report) -> bool:
        """Send ``report`` if a collector is listening.

        Returns:
            True if the report was delivered.
        """
        with self._client_scope() as client:
            try:
                text = await asyncio.to_thread(client.probe)
            except Exception as e:
                logger.info("Skipping sending test report to cavy-cli - %s.", e)
                return False

            if text != PROBE_RESPONSE:
                logger.info("Skipping sending test report to cavy-cli - Unexpected response.")
                return False

            return await self._send(client, report)

    async def send(self, report: Report) -> bool:
        """POST ``report`` to the collector.

        Returns:
            True on success. Failures are logged, never raised.
        """
        with self._client_scope() as client:
            return await self._send(client, report)

    async def _send(self, client: CollectorHttpClient, report: Report) -> bool:
        url = client.report_url
        try:
            await asyncio.to_thread(client.post_report, report.to_dict())
        except Exception as e:
            self.handle_error(e, url)
            return False

        logger.info("Cavy test report successfully sent to cavy-cli")
        return True

    def handle_error(self, error: Exception, url: str) -> None:
        """Log a delivery failure, grouped under a one-line header."""
        if isinstance(error, requests.ConnectionError):
            logger.warning(
                "Cavy test report server is not running at %s\n"
                "  If you are using cavy-cli, maybe it's not set up correctly "
                "or not reachable from this device?",
                url,
            )
        else:
            logger.warning("Error sending test results\n  %s", error)
