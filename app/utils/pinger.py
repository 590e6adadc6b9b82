# app/utils/pinger.py

import asyncio
import logging
from typing import List, Optional

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


class LivenessPinger:
    """
    Keeps the host awake by hitting an external health check and our own
    health check on fixed intervals. Failures are logged and otherwise ignored.
    """

    def __init__(
        self,
        external_url: str = settings.EXTERNAL_PING_URL,
        self_url: str = settings.SELF_PING_URL,
        external_interval: float = settings.EXTERNAL_PING_INTERVAL,
        self_interval: float = settings.SELF_PING_INTERVAL,
        external_timeout: float = settings.EXTERNAL_PING_TIMEOUT,
        self_timeout: float = settings.SELF_PING_TIMEOUT,
        start_delay: float = settings.PING_START_DELAY,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.external_url = external_url
        self.self_url = self_url
        self.external_interval = external_interval
        self.self_interval = self_interval
        self.external_timeout = external_timeout
        self.self_timeout = self_timeout
        self.start_delay = start_delay
        self.client = httpx.AsyncClient(transport=transport)
        self._tasks: List[asyncio.Task] = []

    async def _ping(self, label: str, url: str, timeout: float) -> Optional[int]:
        try:
            response = await self.client.get(url, timeout=timeout)
        except httpx.TimeoutException:
            logger.warning(f"{label} timeout")
            return None
        except httpx.HTTPError as e:
            logger.warning(f"{label} failed: {str(e)}")
            return None
        except Exception as e:
            logger.warning(f"{label} failed: {e!r}")
            return None
        logger.info(f"{label} successful: {response.status_code}")
        return response.status_code

    async def ping_external(self) -> Optional[int]:
        return await self._ping("External API ping", self.external_url, self.external_timeout)

    async def ping_self(self) -> Optional[int]:
        return await self._ping("Self-ping", self.self_url, self.self_timeout)

    async def _run_every(self, interval: float, ping) -> None:
        await asyncio.sleep(self.start_delay)
        while True:
            await asyncio.sleep(interval)
            await ping()

    def start(self) -> None:
        if self._tasks:
            return
        loop = asyncio.get_running_loop()
        self._tasks = [
            loop.create_task(self._run_every(self.external_interval, self.ping_external)),
            loop.create_task(self._run_every(self.self_interval, self.ping_self)),
        ]
        logger.info("API pinging scheduled:")
        logger.info(f"- External API: every {self.external_interval:g} seconds")
        logger.info(f"- Self-ping: every {self.self_interval:g} seconds")

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks)

    async def stop(self) -> None:
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks = []
        await self.client.aclose()
