#region Overview
"""
MCP front end for the Smooth Operator Agent Tools server.

Each agent gets its own MCP connection and therefore its own process and
client. The first call to `start_server` launches the locally installed
server; every other tool forwards one request to it. If
SMOOTH_OPERATOR_BASE_URL is set, tools talk to that server directly and
`start_server` is refused.

Every tool returns a JSON string. Failures come back as
{"ok": false, "summary": ..., "error": {...}} instead of raising.

Run with:
    python -m smooth_operator
"""
#endregion

#region Imports
import os
import logging
from typing import Optional
from mcp.server.fastmcp import FastMCP
#endregion

#region Import from your package __init__.py
from smooth_operator.context import get_client, reset_client
from smooth_operator.decorators import tool_envelope, ensure_server_ready
from smooth_operator.models import MechanismType
#endregion

#region Logger
logger = logging.getLogger(__name__)
#endregion

#region FastMCP Initialization
mcp = FastMCP("smooth_operator")
#endregion

#region Tools -- Server lifecycle
@mcp.tool()
@tool_envelope
async def smooth_operator__start_server() -> str:
    """
    Launch the locally installed Agent Tools server and wait until it answers.

    Call this once before any other tool. Calling it again while the server
    is running reports the current address instead of failing.
    """
    client = get_client()
    if client.session.is_started():
        return {"ok": True, "base_url": client.base_url, "already_running": True}
    base_url = await client.start_server()
    return {"ok": True, "base_url": base_url}


@mcp.tool()
@tool_envelope
def smooth_operator__stop_server() -> str:
    """Stop the server started by `start_server`. Safe to call repeatedly."""
    reset_client()
    return {"ok": True}
#endregion

#region Tools -- Screenshot and system
@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__take_screenshot():
    """Capture the entire screen. Returns base64 JPEG data in `imageBase64`."""
    return await get_client().screenshot.take()


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__find_ui_element(description: str, mechanism: str = MechanismType.SCREEN_GRASP2.value):
    """
    Locate a UI element on screen from a natural-language description.

    Args:
        description: Be specific and include unique identifiers (labels, icons, position).
        mechanism: One of the MechanismType values, e.g. "screengrasp2".
    """
    return await get_client().screenshot.find_ui_element(description, MechanismType(mechanism))


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__get_overview():
    """Open windows, focused element, Chrome tabs, desktop/taskbar icons and installed programs."""
    return await get_client().system.get_overview()


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__get_window_details(window_id: str):
    """UI automation tree of a window; `window_id` comes from `get_overview`."""
    return await get_client().system.get_window_details(window_id)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__open_application(app_name_or_path: str):
    """Launch an application by full path or name (e.g. "notepad"). Use `open_chrome` for Chrome."""
    return await get_client().system.open_application(app_name_or_path)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__open_chrome(url: Optional[str] = None):
    """Open the server-managed Chrome, optionally at `url`."""
    return await get_client().system.open_chrome(url)
#endregion

#region Tools -- Mouse
@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__mouse_click(x: int, y: int, button: str = "left", double: bool = False):
    """
    Click at screen coordinates, (0, 0) being the top-left corner.

    Args:
        button: "left" or "right".
        double: Double-click (left button only).
    """
    mouse = get_client().mouse
    if button == "right":
        return await mouse.right_click(x, y)
    if double:
        return await mouse.double_click(x, y)
    return await mouse.click(x, y)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__mouse_move(x: int, y: int):
    return await get_client().mouse.move(x, y)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__mouse_drag(start_x: int, start_y: int, end_x: int, end_y: int):
    return await get_client().mouse.drag(start_x, start_y, end_x, end_y)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__mouse_scroll(x: int, y: int, clicks: int, direction: Optional[str] = None):
    """
    Scroll at (x, y). Positive `clicks` scroll down, negative up; an explicit
    `direction` ("up"/"down") overrides the sign.
    """
    return await get_client().mouse.scroll(x, y, clicks, direction)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__mouse_click_by_description(
    description: str,
    button: str = "left",
    double: bool = False,
    mechanism: str = MechanismType.SCREEN_GRASP2.value,
):
    """Find an element with AI vision and click it. Consumes 50-100 tokens of the API key."""
    mouse = get_client().mouse
    mech = MechanismType(mechanism)
    if button == "right":
        return await mouse.right_click_by_description(description, mech)
    if double:
        return await mouse.double_click_by_description(description, mech)
    return await mouse.click_by_description(description, mech)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__mouse_drag_by_description(start_description: str, end_description: str):
    return await get_client().mouse.drag_by_description(start_description, end_description)
#endregion

#region Tools -- Keyboard
@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__keyboard_type(text: str, element_description: Optional[str] = None):
    """Type text at the cursor, or into the element matching `element_description`."""
    keyboard = get_client().keyboard
    if element_description:
        return await keyboard.type_at_element(element_description, text)
    return await keyboard.type(text)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__keyboard_press(key: str):
    """Press a key or combination, e.g. "Enter", "Ctrl+C", "Alt+F4"."""
    return await get_client().keyboard.press(key)
#endregion

#region Tools -- Chrome
@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__chrome_navigate(url: str, new_tab: bool = False):
    chrome = get_client().chrome
    if new_tab:
        return await chrome.new_tab(url)
    return await chrome.navigate(url)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__chrome_explain_current_tab():
    """Most relevant elements of the current tab with CSS selectors for the other chrome tools."""
    return await get_client().chrome.explain_current_tab()


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__chrome_click_element(selector: str):
    return await get_client().chrome.click_element(selector)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__chrome_simulate_input(selector: str, text: str):
    return await get_client().chrome.simulate_input(selector, text)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__chrome_get_text():
    return await get_client().chrome.get_text()


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__chrome_execute_script(script: str):
    """Run JavaScript in the current tab and return its result."""
    return await get_client().chrome.execute_script(script)
#endregion

#region Tools -- Automation and code
@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__automation_invoke(element_id: str):
    return await get_client().automation.invoke(element_id)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__automation_set_value(element_id: str, value: str):
    return await get_client().automation.set_value(element_id, value)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__automation_click_element(description: str):
    return await get_client().automation.click_element(description)


@mcp.tool()
@tool_envelope
@ensure_server_ready
async def smooth_operator__execute_csharp(code: str):
    """Run C# code on the server machine and return its output."""
    return await get_client().code.execute_csharp(code)
#endregion


def main() -> None:
    logging.basicConfig(level=os.getenv("SMOOTH_OPERATOR_LOG_LEVEL", "INFO").upper())
    try:
        mcp.run()
    finally:
        reset_client()


if __name__ == "__main__":
    main()
