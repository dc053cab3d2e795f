"""Mouse input, by coordinates or by element description."""

from typing import Optional

from ..models import ActionResponse, MechanismType
from ._base import ApiBase


class MouseApi(ApiBase):
    """Coordinates are screen pixels, (0, 0) is the top-left corner."""

    async def click(self, x: int, y: int) -> ActionResponse:
        return await self._post("/tools-api/mouse/click", {"x": x, "y": y}, ActionResponse)

    async def double_click(self, x: int, y: int) -> ActionResponse:
        return await self._post("/tools-api/mouse/doubleclick", {"x": x, "y": y}, ActionResponse)

    async def right_click(self, x: int, y: int) -> ActionResponse:
        return await self._post("/tools-api/mouse/rightclick", {"x": x, "y": y}, ActionResponse)

    async def move(self, x: int, y: int) -> ActionResponse:
        return await self._post("/tools-api/mouse/move", {"x": x, "y": y}, ActionResponse)

    async def drag(self, start_x: int, start_y: int, end_x: int, end_y: int) -> ActionResponse:
        return await self._post(
            "/tools-api/mouse/drag",
            {"startX": start_x, "startY": start_y, "endX": end_x, "endY": end_y},
            ActionResponse,
        )

    async def scroll(self, x: int, y: int, clicks: int, direction: Optional[str] = None) -> ActionResponse:
        """
        Scroll the wheel at (x, y).

        Without ``direction`` the sign of ``clicks`` decides: positive scrolls
        down, negative up. An explicit ``direction`` ("up"/"down") wins over
        the sign. The server always receives a non-negative click count.
        """
        if direction is None:
            direction = "down" if clicks > 0 else "up"
        return await self._post(
            "/tools-api/mouse/scroll",
            {"x": x, "y": y, "clicks": abs(clicks), "direction": direction},
            ActionResponse,
        )

    async def _by_description(self, path: str, description: str, mechanism: MechanismType) -> ActionResponse:
        return await self._post(path, {"taskDescription": description, "mechanism": mechanism}, ActionResponse)

    async def click_by_description(
        self, user_element_description: str, mechanism: MechanismType = MechanismType.SCREEN_GRASP2
    ) -> ActionResponse:
        """Find an element with AI vision and left-click it."""
        return await self._by_description("/tools-api/mouse/click-by-description", user_element_description, mechanism)

    async def double_click_by_description(
        self, user_element_description: str, mechanism: MechanismType = MechanismType.SCREEN_GRASP2
    ) -> ActionResponse:
        return await self._by_description(
            "/tools-api/mouse/doubleclick-by-description", user_element_description, mechanism
        )

    async def right_click_by_description(
        self, user_element_description: str, mechanism: MechanismType = MechanismType.SCREEN_GRASP2
    ) -> ActionResponse:
        return await self._by_description(
            "/tools-api/mouse/rightclick-by-description", user_element_description, mechanism
        )

    async def move_by_description(
        self, user_element_description: str, mechanism: MechanismType = MechanismType.SCREEN_GRASP2
    ) -> ActionResponse:
        return await self._by_description("/tools-api/mouse/move-by-description", user_element_description, mechanism)

    async def drag_by_description(
        self, start_element_description: str, end_element_description: str
    ) -> ActionResponse:
        """Find both elements with AI vision and drag from the first to the second."""
        return await self._post(
            "/tools-api/mouse/drag-by-description",
            {
                "startElementDescription": start_element_description,
                "endElementDescription": end_element_description,
            },
            ActionResponse,
        )
