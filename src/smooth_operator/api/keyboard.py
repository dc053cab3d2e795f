"""Keyboard input."""

from ..models import ActionResponse
from ._base import ApiBase


class KeyboardApi(ApiBase):

    async def type(self, text: str) -> ActionResponse:
        """Type text at the current cursor position."""
        return await self._post("/tools-api/keyboard/type", {"text": text}, ActionResponse)

    async def press(self, key: str) -> ActionResponse:
        """Press a key or combination, e.g. "Ctrl+C" or "Alt+F4"."""
        return await self._post("/tools-api/keyboard/press", {"key": key}, ActionResponse)

    async def type_at_element(self, element_description: str, text_to_type: str) -> ActionResponse:
        """Find an element from its description and type into it."""
        return await self._post(
            "/tools-api/keyboard/type-at-element",
            {"elementDescription": element_description, "textToType": text_to_type},
            ActionResponse,
        )
