"""Windows UI automation."""

from ..models import ActionResponse, SimpleResponse, WindowDetailInfosDTO
from ._base import ApiBase


class AutomationApi(ApiBase):
    """Element and window ids come from SystemApi.get_overview() / get_window_details()."""

    async def open_application(self, app_name_or_path: str) -> SimpleResponse:
        return await self._post(
            "/tools-api/system/open-application", {"appNameOrPath": app_name_or_path}, SimpleResponse
        )

    async def invoke(self, element_id: str) -> SimpleResponse:
        """Invoke the element's default action (e.g. press a button)."""
        return await self._post("/tools-api/automation/invoke", {"elementId": element_id}, SimpleResponse)

    async def set_value(self, element_id: str, value: str) -> SimpleResponse:
        return await self._post(
            "/tools-api/automation/set-value", {"elementId": element_id, "value": value}, SimpleResponse
        )

    async def set_focus(self, element_id: str) -> SimpleResponse:
        return await self._post("/tools-api/automation/set-focus", {"elementId": element_id}, SimpleResponse)

    async def get_window_details(self, window_id: str) -> WindowDetailInfosDTO:
        return await self._post("/tools-api/automation/get-details", {"windowId": window_id}, WindowDetailInfosDTO)

    async def bring_to_front(self, window_id: str) -> SimpleResponse:
        return await self._post("/tools-api/automation/bring-to-front", {"windowId": window_id}, SimpleResponse)

    async def click_element(self, description: str) -> ActionResponse:
        return await self._post("/tools-api/automation/click-element", {"description": description}, ActionResponse)

    async def type_in_element(self, description: str, text: str) -> ActionResponse:
        return await self._post(
            "/tools-api/automation/type-in-element", {"description": description, "text": text}, ActionResponse
        )

    async def get_element_text(self, description: str) -> ActionResponse:
        """The element's text comes back in ``result_value``."""
        return await self._post(
            "/tools-api/automation/get-element-text", {"description": description}, ActionResponse
        )
