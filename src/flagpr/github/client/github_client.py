from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from flagpr.core.config_models import DEFAULT_GITHUB_API_URL


@dataclass(frozen=True)
class GitHubClient:
    token: str
    api_url: str = DEFAULT_GITHUB_API_URL
    transport: Optional[httpx.AsyncBaseTransport] = None

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"token {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    def url(self, path: str) -> str:
        return f"{self.api_url.rstrip('/')}/{path.lstrip('/')}"

    def _client(self) -> httpx.AsyncClient:
        # No timeout: a slow forge call waits rather than failing the run
        return httpx.AsyncClient(timeout=None, transport=self.transport)

    async def get_json(self, url: str) -> dict:
        async with self._client() as client:
            r = await client.get(url, headers=self.headers())
            r.raise_for_status()
            return r.json()

    async def post_json(self, url: str, body: dict) -> dict:
        async with self._client() as client:
            r = await client.post(url, headers=self.headers(), json=body)
            r.raise_for_status()
            return r.json()
