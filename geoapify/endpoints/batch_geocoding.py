import logging
from typing import List, Optional, Sequence, Tuple

from geoapify.models import BatchComplete, BatchJob, BatchResult, LocationType
from geoapify.poller import PollResult, wait_for

from .base import Params, Service, joined, query

log = logging.getLogger(__name__)

FORWARD_PATH = "/v1/batch/geocode/search"
REVERSE_PATH = "/v1/batch/geocode/reverse"


class BatchForwardParams(Params):
    addresses: List[str]
    type: Optional[LocationType] = None
    lang: Optional[str] = None
    filters: List[str] = []
    biases: List[str] = []

    def to_query(self):
        return query(
            ("type", self.type),
            ("lang", self.lang),
            ("filter", joined(self.filters, "|")),
            ("bias", joined(self.biases, "|")),
        )


class BatchReverseParams(Params):
    """Coordinates are (lon, lat) pairs, as the batch API expects them."""

    coordinates: List[Tuple[float, float]]
    type: Optional[LocationType] = None
    lang: Optional[str] = None

    def to_query(self):
        return query(("type", self.type), ("lang", self.lang))


class BatchGeocodingService(Service):
    """Submits batch geocoding jobs and collects their results."""

    async def submit_forward(self, params: BatchForwardParams) -> BatchJob:
        return await self.client.execute_post(
            FORWARD_PATH, params.to_query(), list(params.addresses), BatchJob
        )

    async def submit_reverse(self, params: BatchReverseParams) -> BatchJob:
        return await self.client.execute_post(
            REVERSE_PATH,
            params.to_query(),
            [list(pair) for pair in params.coordinates],
            BatchJob,
        )

    async def forward_result(
        self, job_id: str, format: Optional[str] = None
    ) -> BatchResult:
        """Fetches a forward job: BatchPending while running, else BatchComplete."""
        return await self._result(FORWARD_PATH, job_id, format)

    async def reverse_result(
        self, job_id: str, format: Optional[str] = None
    ) -> BatchResult:
        return await self._result(REVERSE_PATH, job_id, format)

    async def wait_forward_result(
        self, job_id: str, interval: float, timeout: float
    ) -> BatchComplete:
        """Polls a forward job until its results are ready.

        Args:
            job_id (str): ID returned by `submit_forward`.
            interval (float): Seconds between polls.
            timeout (float): Maximum total seconds to poll.

        Raises:
            PollTimeoutError: If the job is still pending after `timeout`.
        """
        return await self._wait(FORWARD_PATH, job_id, interval, timeout)

    async def wait_reverse_result(
        self, job_id: str, interval: float, timeout: float
    ) -> BatchComplete:
        return await self._wait(REVERSE_PATH, job_id, interval, timeout)

    async def _result(
        self, path: str, job_id: str, format: Optional[str]
    ) -> BatchResult:
        params: Sequence[Tuple[str, str]] = [("id", job_id)] + query(
            ("format", format)
        )
        return await self.client.execute_get(path, params, BatchResult)

    async def _wait(
        self, path: str, job_id: str, interval: float, timeout: float
    ) -> BatchComplete:
        async def poll_job() -> PollResult:
            result = await self._result(path, job_id, None)
            if isinstance(result, BatchComplete):
                return PollResult(done=True, value=result)
            return PollResult(done=False, info=result)

        return await wait_for(
            poll_job,
            interval=interval,
            timeout=timeout,
            on_retry=lambda result: log.info(
                "Batch job %s status = '%s'", job_id, result.info.status
            ),
        )
