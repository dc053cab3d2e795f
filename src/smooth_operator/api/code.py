"""C# code execution on the server."""

from ..models import CSharpCodeResponse
from ._base import ApiBase


class CodeApi(ApiBase):

    async def execute_csharp(self, code: str) -> CSharpCodeResponse:
        return await self._post("/tools-api/code/csharp", {"code": code}, CSharpCodeResponse)

    async def generate_and_execute_csharp(self, task_description: str) -> CSharpCodeResponse:
        """
        Have the server write C# for ``task_description`` and run it.
        Include the previous error in the description when retrying.
        """
        return await self._post(
            "/tools-api/code/csharp/generate-and-execute",
            {"taskDescription": task_description},
            CSharpCodeResponse,
        )
