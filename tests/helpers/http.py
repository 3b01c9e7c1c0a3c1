from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from bomcopyright.adapters.http_resilience import ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from bomcopyright.config import ResilienceConfig


def make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        kwargs: dict[str, object] = {"transport": httpx.MockTransport(async_handler)}
        if resilience.base_url is not None:
            kwargs["base_url"] = resilience.base_url
        client._client = httpx.AsyncClient(**kwargs)  # noqa: SLF001  # type: ignore[reportPrivateUsage]
        return client

    return factory
