# commit_relay/github_client.py
import logging
from typing import Any, Optional, Union

import httpx

from .config import Settings
from .models import RateLimitSignal

logger = logging.getLogger(__name__)

USER_AGENT = "Commit-Relay"


class GitHubClient:
    """
    Thin wrapper around the GitHub REST API.

    Built once from ``Settings`` when the app starts and shared read-only by
    every request. ``transport`` lets tests swap the network for an
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": USER_AGENT,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "GitHubClient":
        if not settings.github_token:
            logger.warning(
                "GITHUB_TOKEN is not set - unauthenticated requests are limited to 60/hour"
            )
        return cls(
            base_url=settings.github_api_url,
            token=settings.github_token,
            timeout=settings.github_timeout,
            transport=transport,
        )

    async def get_json(self, path: str) -> Union[Any, RateLimitSignal]:
        """
        GET ``path`` and return the decoded JSON body.

        An exhausted quota (403 with ``X-RateLimit-Remaining: 0``) comes back
        as a ``RateLimitSignal``; every other failure raises the ``httpx``
        error unchanged.
        """
        logger.debug(f"GitHub GET {path}")
        resp = await self.client.get(path)
        logger.info(f"GitHub {path} status: {resp.status_code}")

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError:
            if resp.status_code == 403 and resp.headers.get("x-ratelimit-remaining") == "0":
                retry_after = resp.headers.get("x-ratelimit-reset")
                logger.warning(f"GitHub rate limit exceeded, resets at {retry_after}")
                return RateLimitSignal(retry_after=retry_after)
            raise

        return resp.json()

    async def aclose(self) -> None:
        await self.client.aclose()
