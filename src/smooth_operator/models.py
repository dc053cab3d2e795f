"""
Response models for the Agent Tools API.

All models are dataclasses built from the already-normalized (camelCase)
dicts the dispatcher returns. ``from_dict`` ignores unknown keys and fills
missing ones with defaults, so a newer server never breaks an older
client. ``to_dict`` produces camelCase keys again.
"""

import base64
import enum
from dataclasses import dataclass, field, fields
from typing import Any, List, Optional


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(p[:1].upper() + p[1:] for p in rest)


def _nested(model: str, many: bool = False, **kwargs):
    """Field holding another model (by class name, resolved lazily) or a list of them."""
    return field(metadata={"model": model, "many": many}, **kwargs)


class MechanismType(str, enum.Enum):
    """AI mechanism used to locate UI elements from a description."""

    SCREEN_GRASP2 = "screengrasp2"
    SCREEN_GRASP2_LOW = "screengrasp2-low"
    SCREEN_GRASP_MEDIUM = "screengrasp-medium"
    SCREEN_GRASP_HIGH = "screengrasp-high"
    LLABS = "llabs"
    ANTHROPIC_COMPUTER_USE = "anthropic-computer-use"
    OPENAI_COMPUTER_USE = "openai-computer-use"
    QWEN25_VL_72B = "qwen25-vl-72b"


class ExistingChromeInstanceStrategy(enum.IntEnum):
    """What open_chrome does when Chrome already runs with the same profile."""

    THROW_ERROR = 0
    FORCE_CLOSE = 1
    START_WITHOUT_USER_PROFILE = 2


class Model:
    """Mixin with camelCase dict conversion for the dataclasses below."""

    @classmethod
    def from_dict(cls, data: Optional[dict]):
        if data is None:
            return None
        if isinstance(data, cls):
            return data
        kwargs = {}
        for f in fields(cls):
            if not f.init or f.metadata.get("skip"):
                continue
            key = _camel(f.name)
            if key not in data:
                continue
            value = data[key]
            model_name = f.metadata.get("model")
            if model_name and value is not None:
                model = globals()[model_name]
                if f.metadata.get("many"):
                    value = [model.from_dict(v) for v in value]
                else:
                    value = model.from_dict(value)
            kwargs[f.name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict:
        out = {}
        for f in fields(self):
            if f.metadata.get("skip"):
                continue
            out[_camel(f.name)] = _plain(getattr(self, f.name))
        return out


def _plain(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, enum.Enum):
        return value.value
    return value


# ============================================================================
# Generic responses
# ============================================================================

@dataclass
class ActionResponse(Model):
    """Generic response of action endpoints."""

    success: bool = False
    message: Optional[str] = None
    result_value: Optional[str] = None
    """Extra result data; plain text or a JSON string for complex results."""


@dataclass
class SimpleResponse(Model):
    success: bool = True
    message: Optional[str] = None
    internal_message: Optional[str] = None


@dataclass
class ScreenshotResponse(Model):
    success: bool = False
    image_base64: str = ""
    timestamp: str = ""
    message: Optional[str] = None

    @property
    def image_bytes(self) -> bytes:
        return base64.b64decode(self.image_base64)

    @property
    def image_mime_type(self) -> str:
        return "image/jpeg"


@dataclass
class Point(Model):
    x: int = 0
    y: int = 0


@dataclass
class ScreenGrasp2Response(ActionResponse):
    """Result of locating an element by description; x/y are None when not found."""

    x: Optional[int] = None
    y: Optional[int] = None
    status: Optional[str] = None


@dataclass
class ChromeScriptResponse(ActionResponse):
    result: Optional[str] = None


@dataclass
class CSharpCodeResponse(ActionResponse):
    result: Optional[str] = None


# ============================================================================
# Chrome
# ============================================================================

@dataclass
class ChromeTab(Model):
    id: str = ""
    title: str = ""
    url: str = ""
    is_active: bool = False


@dataclass
class ChromeElementInfo(Model):
    """An element of the current Chrome tab, as ranked by the server."""

    smooth_op_id: Optional[str] = None
    tag_name: Optional[str] = None
    css_selector: Optional[str] = None
    inner_text: Optional[str] = None
    is_visible: Optional[bool] = None
    score: Optional[float] = None
    role: Optional[str] = None
    value: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    class_name: Optional[str] = None
    semantic: Optional[str] = None
    data_attributes: Optional[str] = None
    truncated_html: Optional[str] = None
    bounding_rect: Optional[List[int]] = None
    """[x, y, width, height]"""
    center_point: Optional[Point] = _nested("Point", default=None)


@dataclass
class TabData(Model):
    id: str = ""
    url: str = ""
    is_active: bool = False
    html: Optional[str] = None
    text: Optional[str] = None
    id_string: Optional[str] = None
    tab_nr: int = 0


@dataclass
class ChromeOverview(Model):
    instance_id: str = ""
    tabs: List[TabData] = _nested("TabData", many=True, default_factory=list)
    last_update: str = ""


@dataclass
class ChromeTabDetails(Model):
    current_tab_title: str = ""
    current_tab_index: int = 0
    current_chrome_tab_most_relevant_elements: List[ChromeElementInfo] = _nested(
        "ChromeElementInfo", many=True, default_factory=list
    )
    chrome_instances: List[ChromeOverview] = _nested("ChromeOverview", many=True, default_factory=list)
    note: Optional[str] = None


# ============================================================================
# Desktop
# ============================================================================

@dataclass
class DesktopIconDTO(Model):
    name: str = ""
    path: str = ""


@dataclass
class TaskbarIconDTO(Model):
    name: str = ""
    path: str = ""


@dataclass
class InstalledProgramDTO(Model):
    name: str = ""
    executable_path: str = ""


@dataclass
class ControlDTO(Model):
    """
    A node of a window's UI automation tree.

    Children are owned by their parent. ``parent`` is a back-reference set
    while the tree is built; it takes no part in equality, repr or
    ``to_dict`` so serializing a tree only walks downwards.
    """

    id: str = ""
    name: Optional[str] = None
    creation_date: str = ""
    control_type: Optional[str] = None
    supports_set_value: Optional[bool] = None
    supports_invoke: Optional[bool] = None
    current_value: Optional[str] = None
    children: Optional[List["ControlDTO"]] = _nested("ControlDTO", many=True, default=None)
    is_smooth_operator: bool = False
    parent: Optional["ControlDTO"] = field(
        default=None, repr=False, compare=False, metadata={"skip": True}
    )

    def __post_init__(self):
        for child in self.children or []:
            if child is not None:
                child.parent = self

    @property
    def children_recursive(self) -> List["ControlDTO"]:
        """All descendants, depth first."""
        out: List[ControlDTO] = []
        for child in self.children or []:
            if child is not None:
                out.append(child)
                out.extend(child.children_recursive)
        return out

    @property
    def parents_recursive(self) -> List["ControlDTO"]:
        """Ancestors from the direct parent up to the root."""
        out: List[ControlDTO] = []
        current = self.parent
        while current is not None:
            out.append(current)
            current = current.parent
        return out

    @property
    def parent_window(self) -> Optional["ControlDTO"]:
        """Closest ancestor whose control type is Window."""
        for ancestor in self.parents_recursive:
            if ancestor.control_type == "Window":
                return ancestor
        return None


@dataclass
class WindowInfoDTO(Model):
    id: str = ""
    title: Optional[str] = None
    executable_path: Optional[str] = None
    is_foreground: Optional[bool] = None
    process_name: Optional[str] = None
    is_minimized: Optional[bool] = None
    detail_infos: Optional["WindowDetailResponse"] = _nested("WindowDetailResponse", default=None)


@dataclass
class WindowDetailInfosDTO(Model):
    """UI automation details of one window."""

    note: Optional[str] = None
    window: Optional[WindowInfoDTO] = _nested("WindowInfoDTO", default=None)
    user_interface_elements: Optional[ControlDTO] = _nested("ControlDTO", default=None)


@dataclass
class WindowDetailResponse(Model):
    details: Optional[WindowDetailInfosDTO] = _nested("WindowDetailInfosDTO", default=None)
    message: Optional[str] = None


@dataclass
class FocusInformation(Model):
    focused_element: Optional[ControlDTO] = _nested("ControlDTO", default=None)
    focused_element_parent_window: Optional[WindowInfoDTO] = _nested("WindowInfoDTO", default=None)
    some_other_elements_in_same_window_that_might_be_relevant: Optional[List[ControlDTO]] = _nested(
        "ControlDTO", many=True, default=None
    )
    current_chrome_tab_most_relevant_elements: Optional[List[ChromeElementInfo]] = _nested(
        "ChromeElementInfo", many=True, default=None
    )
    is_chrome: bool = False
    note: Optional[str] = None


@dataclass
class OverviewResponse(Model):
    """Open windows, focus, Chrome instances, icons and installed programs."""

    windows: Optional[List[WindowInfoDTO]] = _nested("WindowInfoDTO", many=True, default=None)
    focus_info: Optional[FocusInformation] = _nested("FocusInformation", default=None)
    chrome_instances: Optional[List[ChromeOverview]] = _nested("ChromeOverview", many=True, default=None)
    taskbar_icons: Optional[List[TaskbarIconDTO]] = _nested("TaskbarIconDTO", many=True, default=None)
    desktop_icons: Optional[List[DesktopIconDTO]] = _nested("DesktopIconDTO", many=True, default=None)
    installed_programs: Optional[List[InstalledProgramDTO]] = _nested(
        "InstalledProgramDTO", many=True, default=None
    )
    important_note: Optional[str] = None


__all__ = [
    "MechanismType",
    "ExistingChromeInstanceStrategy",
    "Model",
    "ActionResponse",
    "SimpleResponse",
    "ScreenshotResponse",
    "Point",
    "ScreenGrasp2Response",
    "ChromeScriptResponse",
    "CSharpCodeResponse",
    "ChromeTab",
    "ChromeElementInfo",
    "TabData",
    "ChromeOverview",
    "ChromeTabDetails",
    "DesktopIconDTO",
    "TaskbarIconDTO",
    "InstalledProgramDTO",
    "ControlDTO",
    "WindowInfoDTO",
    "WindowDetailInfosDTO",
    "WindowDetailResponse",
    "FocusInformation",
    "OverviewResponse",
]
