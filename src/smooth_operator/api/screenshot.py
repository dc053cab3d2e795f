"""Screenshot and visual element lookup."""

from ..models import MechanismType, ScreenGrasp2Response, ScreenshotResponse
from ._base import ApiBase


class ScreenshotApi(ApiBase):

    async def take(self) -> ScreenshotResponse:
        """Capture the entire screen as a base64-encoded JPEG."""
        return await self._get("/tools-api/screenshot", ScreenshotResponse)

    async def find_ui_element(
        self,
        user_element_description: str,
        mechanism: MechanismType = MechanismType.SCREEN_GRASP2,
    ) -> ScreenGrasp2Response:
        """
        Locate a UI element on a fresh screenshot from a text description.

        Args:
            user_element_description: What to look for; be specific.
            mechanism: AI mechanism used for the lookup.

        Returns:
            ScreenGrasp2Response with x/y of the element, if found.
        """
        return await self._post(
            "/tools-api/screenshot/find-ui-element",
            {"taskDescription": user_element_description, "mechanism": mechanism},
            ScreenGrasp2Response,
        )
