"""SIRI StopMonitoring departure repository."""

import asyncio
import logging
from collections.abc import Sequence

import aiohttp

from siri_departures.adapters.api_request_logger import log_api_request
from siri_departures.adapters.siri.request_builder import build_stop_monitoring_request
from siri_departures.adapters.siri.response_parser import SiriResponseParser
from siri_departures.domain.errors import DepartureQueryError
from siri_departures.domain.models import Departure

logger = logging.getLogger(__name__)


class SiriDepartureRepository:
    """Departure repository querying a SIRI StopMonitoring endpoint over HTTP POST."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        endpoint: str,
        dataset_id: str,
        requestor_ref: str = "opendata",
        timeout_seconds: int = 10,
        log_requests: bool = False,
    ) -> None:
        """Initialize with an aiohttp session and endpoint settings."""
        self._session = session
        self._endpoint = endpoint
        self._dataset_id = dataset_id
        self._requestor_ref = requestor_ref
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._log_requests = log_requests

    async def get_departures(
        self, stop_ids: Sequence[str], limit: int = 5
    ) -> dict[str, list[Departure]]:
        """Get upcoming departures for each stop, in the order given.

        Raises:
            DepartureQueryError: If any request fails or returns an invalid response.
        """
        results: dict[str, list[Departure]] = {}
        for stop_id in stop_ids:
            results[stop_id] = await self._get_stop_departures(stop_id, limit)
        return results

    async def _get_stop_departures(self, stop_id: str, limit: int) -> list[Departure]:
        """Query departures for a single stop."""
        body = build_stop_monitoring_request(stop_id, limit, self._requestor_ref)
        headers = {
            "Content-Type": "application/xml",
            "datasetId": self._dataset_id,
        }
        log_api_request(
            "POST", self._endpoint, enabled=self._log_requests, headers=headers, payload=body
        )

        try:
            async with self._session.post(
                self._endpoint, data=body, headers=headers, timeout=self._timeout
            ) as response:
                response_text = await response.text()
                if response.status != 200:
                    raise DepartureQueryError(
                        f"SIRI endpoint returned status {response.status}: {response_text[:200]}"
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DepartureQueryError(f"Error querying departures for {stop_id}: {e}") from e

        logger.debug(f"SIRI response for {stop_id}:\n{response_text}")
        departures = SiriResponseParser.parse(response_text, stop_id, limit)
        logger.info(f"Fetched {len(departures)} departure(s) for {stop_id}")
        return departures
