import base64
import json
from dataclasses import dataclass
from logging import getLogger
from typing import Any, Dict, Optional

import aiohttp

TRANSACTION_PATH = "/db/data/transaction"


def make_auth_token(username: Optional[str], password: Optional[str]) -> str:
    if not (username and password):
        return ""
    return base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")


@dataclass(slots=True, frozen=True)
class HttpResponse:
    status: int
    reason: str
    text: str

    def json(self) -> Any:
        return json.loads(self.text) if self.text.strip() else None


class Neo4jHttpConnection:
    """Issues requests against the graph database's HTTP API.

    Every request opens and closes its own ``aiohttp.ClientSession``; no
    connections are pooled between requests.
    """

    @classmethod
    def from_configuration(
        cls,
        url: str,
        username: str = None,
        password: str = None,
        timeout: float = None,
    ):
        if not url:
            raise ValueError("A `url` must be specified for the graph database.")
        return cls(
            url=url.rstrip("/"),
            auth=make_auth_token(username, password),
            timeout=timeout,
        )

    def __init__(self, url: str, auth: str = "", timeout: float = None) -> None:
        self.url = url
        self.auth = auth
        self.timeout = timeout

    @property
    def logger(self):
        return getLogger(self.__class__.__name__)

    @property
    def transaction_url(self) -> str:
        return f"{self.url}{TRANSACTION_PATH}"

    @property
    def headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json; charset=UTF-8",
        }
        # Without credentials requests go out unauthenticated.
        if self.auth:
            headers["Authorization"] = f"Basic {self.auth}"
        return headers

    def _create_session(self) -> aiohttp.ClientSession:
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        return aiohttp.ClientSession(headers=self.headers, timeout=timeout)

    async def request(
        self, method: str, url: str, payload: Optional[Dict[str, Any]] = None
    ) -> HttpResponse:
        self.logger.debug(
            "Sending request to graph database",
            extra={"method": method, "url": url},
        )
        async with self._create_session() as session:
            async with session.request(method, url, json=payload) as response:
                text = await response.text()
                return HttpResponse(
                    status=response.status,
                    reason=response.reason or "",
                    text=text,
                )

    async def post(
        self, url: str, payload: Optional[Dict[str, Any]] = None
    ) -> HttpResponse:
        return await self.request("POST", url, payload)

    async def delete(self, url: str) -> HttpResponse:
        return await self.request("DELETE", url)
