"""Operations on the server-managed Chrome instance."""

from typing import Optional, Union

from ..models import (
    ActionResponse,
    ChromeScriptResponse,
    ChromeTabDetails,
    ExistingChromeInstanceStrategy,
    SimpleResponse,
)
from ._base import ApiBase, compact


class ChromeApi(ApiBase):

    async def open_chrome(
        self,
        url: Optional[str] = None,
        strategy: Optional[Union[str, ExistingChromeInstanceStrategy]] = None,
    ) -> SimpleResponse:
        return await self._post("/tools-api/system/open-chrome", compact(url=url, strategy=strategy), SimpleResponse)

    async def explain_current_tab(self) -> ChromeTabDetails:
        """Analyse the current tab; returns CSS selectors for its most relevant elements."""
        return await self._post("/tools-api/chrome/current-tab/explain", {}, ChromeTabDetails)

    async def navigate(self, url: str) -> ActionResponse:
        return await self._post("/tools-api/chrome/navigate", {"url": url}, ActionResponse)

    async def reload(self) -> ActionResponse:
        return await self._post("/tools-api/chrome/reload", {}, ActionResponse)

    async def new_tab(self, url: Optional[str] = None) -> ActionResponse:
        return await self._post("/tools-api/chrome/new-tab", compact(url=url), ActionResponse)

    async def click_element(self, selector: str) -> ActionResponse:
        """Click by CSS selector, typically one from explain_current_tab()."""
        return await self._post("/tools-api/chrome/click-element", {"selector": selector}, ActionResponse)

    async def go_back(self) -> ActionResponse:
        return await self._post("/tools-api/chrome/go-back", {}, ActionResponse)

    async def simulate_input(self, selector: str, text: str) -> ActionResponse:
        return await self._post("/tools-api/chrome/simulate-input", {"selector": selector, "text": text}, ActionResponse)

    async def get_dom(self) -> ActionResponse:
        return await self._post("/tools-api/chrome/get-dom", {}, ActionResponse)

    async def get_text(self) -> ActionResponse:
        return await self._post("/tools-api/chrome/get-text", {}, ActionResponse)

    async def execute_script(self, script: str) -> ChromeScriptResponse:
        """Run JavaScript in the current tab."""
        return await self._post("/tools-api/chrome/execute-script", {"script": script}, ChromeScriptResponse)

    async def generate_and_execute_script(self, task_description: str) -> ChromeScriptResponse:
        """Have the server write JavaScript for ``task_description`` and run it."""
        return await self._post(
            "/tools-api/chrome/generate-and-execute-script",
            {"taskDescription": task_description},
            ChromeScriptResponse,
        )
