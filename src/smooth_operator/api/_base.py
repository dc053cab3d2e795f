"""Shared plumbing for the endpoint facades."""

from typing import Any, Optional, Type


def compact(**fields) -> dict:
    """Request body without the optional fields that were left as None."""
    return {k: v for k, v in fields.items() if v is not None}


class ApiBase:
    """Holds the client and turns normalized replies into response models."""

    def __init__(self, client):
        self._client = client

    async def _get(self, path: str, model: Type) -> Any:
        return model.from_dict(await self._client.get(path))

    async def _post(self, path: str, body: Optional[dict], model: Type) -> Any:
        return model.from_dict(await self._client.post(path, body))

    def __str__(self) -> str:
        return type(self).__name__
