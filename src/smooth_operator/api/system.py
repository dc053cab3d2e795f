"""System-level operations: overview, window details, launching apps."""

from typing import Optional, Union

from ..models import ExistingChromeInstanceStrategy, OverviewResponse, SimpleResponse, WindowDetailInfosDTO
from ._base import ApiBase, compact


class SystemApi(ApiBase):

    async def get_overview(self) -> OverviewResponse:
        """Open windows, focused element, Chrome instances, icons and installed programs."""
        return await self._post("/tools-api/system/overview", {}, OverviewResponse)

    async def get_window_details(self, window_id: str) -> WindowDetailInfosDTO:
        """UI automation tree for a window id taken from get_overview()."""
        return await self._post("/tools-api/automation/get-details", {"windowId": window_id}, WindowDetailInfosDTO)

    async def open_chrome(
        self,
        url: Optional[str] = None,
        strategy: Optional[Union[str, ExistingChromeInstanceStrategy]] = None,
    ) -> SimpleResponse:
        """Open a Playwright-managed Chrome, optionally navigating to ``url``."""
        return await self._post("/tools-api/system/open-chrome", compact(url=url, strategy=strategy), SimpleResponse)

    async def open_application(self, app_name_or_path: str) -> SimpleResponse:
        """
        Launch an application by full path, name, or exe name on PATH (notepad, calc).
        Use open_chrome() for Chrome.
        """
        return await self._post(
            "/tools-api/system/open-application", {"appNameOrPath": app_name_or_path}, SimpleResponse
        )
