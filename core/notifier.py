"""
Scan Notifier for the NFC card scanner bridge.

This module provides the ScanNotifier class which reports detected cards
to the game service over HTTP.
"""

from typing import Optional

import requests

from utils.logging import Logger, get_logger
from .cards import CardState


SCAN_PATH = "/api/scanner/{game}/scan"


def build_endpoint(base: str, game: str) -> str:
    """Assemble the scan endpoint for a game."""
    return f"{base}{SCAN_PATH.format(game=game)}"


class ScanNotifier:
    """
    Posts card states to the scan endpoint.

    Each call sends exactly one request and waits for it to finish.
    Nothing is retried and no failure is raised to the caller.
    """

    def __init__(
        self,
        endpoint: str,
        request_timeout: Optional[float] = 10.0,
        session: Optional[requests.Session] = None,
        logger: Optional[Logger] = None
    ):
        """
        Initialize notifier.

        Args:
            endpoint: Full scan URL
            request_timeout: Seconds to wait for the service (None waits forever)
            session: HTTP session (a new one if None)
            logger: Logger instance (shared default if None)
        """
        self.endpoint = endpoint
        self.request_timeout = request_timeout
        self.session = session or requests.Session()
        self.log = logger or get_logger()

    def notify(self, state: CardState) -> Optional[int]:
        """
        Send one card state.

        Returns:
            HTTP status code, or None if the request could not be sent
        """
        try:
            response = self.session.post(
                self.endpoint,
                json=state.to_payload(),
                timeout=self.request_timeout
            )
        except requests.RequestException as e:
            self.log.error(f"Error sending POST request: {e}")
            return None

        self.classify_response(response)
        return response.status_code

    def classify_response(self, response: requests.Response):
        """Log the outcome of a scan request."""
        status = response.status_code
        if status == 200:
            self.log.info("Sent successfully")
        elif status == 400:
            # The service explains the rejection in the body
            self.log.warning(response.text)
        elif status == 404:
            self.log.warning("Invalid URL")
        else:
            self.log.warning(f"Unexpected response status {status}")

    def close(self):
        self.session.close()
