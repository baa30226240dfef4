"""HTTP client for the Turf bulk zone endpoint."""

from __future__ import annotations

import logging
import time
from typing import Sequence

import httpx
from pydantic import ValidationError

from ...config import settings
from ...errors import TransportError
from ...schemas.zones import ZoneRecord, build_query

logger = logging.getLogger(__name__)


class TurfClient:
    """Fetches zone metadata for many zones with one POST request.

    The API answers with a JSON array and leaves out names it does not know.
    """

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_url = api_url or settings.api_url
        self.timeout = timeout if timeout is not None else settings.timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.max_retries
        self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.backoff_seconds
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(timeout=httpx.Timeout(self.timeout, connect=10.0), transport=self._transport)

    def fetch_zones(self, names: Sequence[str]) -> list[ZoneRecord]:
        payload = build_query(names)
        logger.info("Posting %d zone names to %s", len(payload), self.api_url)

        client = self._get_client()
        try:
            attempt = 0
            while True:
                try:
                    response = client.post(self.api_url, json=payload)
                    response.raise_for_status()
                    data = response.json()
                    break
                except httpx.HTTPStatusError as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise TransportError(
                            f"Turf API returned HTTP {e.response.status_code} for {self.api_url}"
                        ) from e
                    time.sleep(self.backoff_seconds * attempt)
                except (httpx.TimeoutException, httpx.NetworkError) as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise TransportError(f"Failed to reach Turf API at {self.api_url}: {e}") from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(
                        "Turf API network error, retrying in %.1fs (attempt %d/%d): %s", wait_time, attempt, self.max_retries, e
                    )
                    time.sleep(wait_time)
                except (httpx.HTTPError, httpx.InvalidURL) as e:
                    raise TransportError(f"Turf API request failed: {e}") from e
                except ValueError as e:
                    raise TransportError(f"Turf API returned invalid JSON: {e}") from e
        finally:
            client.close()

        if not isinstance(data, list):
            raise TransportError(f"Turf API response is not a JSON array: {type(data).__name__}")
        try:
            records = [ZoneRecord.model_validate(item) for item in data]
        except ValidationError as e:
            raise TransportError(f"Turf API returned a malformed zone record: {e}") from e

        logger.info("Turf API returned %d of %d requested zones", len(records), len(payload))
        return records


def check_health(api_url: str | None = None) -> bool:
    """Check the Turf API by requesting an empty zone list."""
    url = api_url or settings.api_url
    try:
        response = httpx.post(url, json=[], timeout=5.0)
        response.raise_for_status()
        return isinstance(response.json(), list)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError):
        return False
