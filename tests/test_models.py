from smooth_operator.models import (
    ActionResponse,
    ControlDTO,
    MechanismType,
    OverviewResponse,
    SimpleResponse,
    WindowDetailInfosDTO,
)


TREE = {
    "id": "root",
    "controlType": "Window",
    "children": [
        {
            "id": "pane",
            "controlType": "Pane",
            "children": [{"id": "btn", "name": "OK", "controlType": "Button", "supportsInvoke": True}],
        },
        {"id": "edit", "controlType": "Edit"},
    ],
}


def test_control_tree_links_parents():
    root = ControlDTO.from_dict(TREE)
    pane, edit = root.children
    btn = pane.children[0]

    assert btn.parent is pane
    assert pane.parent is root
    assert root.parent is None
    assert [c.id for c in root.children_recursive] == ["pane", "btn", "edit"]
    assert [p.id for p in btn.parents_recursive] == ["pane", "root"]
    assert btn.parent_window is root
    assert root.parent_window is None
    assert btn.supports_invoke is True


def test_control_to_dict_walks_downwards_only():
    root = ControlDTO.from_dict(TREE)
    out = root.to_dict()
    assert "parent" not in out
    assert out["children"][0]["children"][0]["name"] == "OK"
    assert out["children"][0]["controlType"] == "Pane"
    assert ControlDTO.from_dict(out) == root


def test_window_details_nested():
    details = WindowDetailInfosDTO.from_dict({
        "note": "n",
        "window": {"id": "w1", "title": "Notepad"},
        "userInterfaceElements": TREE,
    })
    assert details.window.title == "Notepad"
    assert details.user_interface_elements.children[0].children[0].parent_window.id == "root"


def test_overview_nested_lists():
    overview = OverviewResponse.from_dict({
        "windows": [{"id": "1", "detailInfos": {"details": {"note": "x"}}}],
        "focusInfo": {"focusedElement": {"id": "f"}, "isChrome": True},
        "chromeInstances": [{"instanceId": "c", "tabs": [{"id": "t", "url": "u", "tabNr": 2}]}],
        "desktopIcons": [{"name": "Trash", "path": "p"}],
        "installedPrograms": [{"name": "Calc", "executablePath": "calc.exe"}],
        "importantNote": "hi",
        "somethingNew": 1,
    })
    assert overview.windows[0].detail_infos.details.note == "x"
    assert overview.focus_info.focused_element.id == "f"
    assert overview.focus_info.is_chrome is True
    assert overview.chrome_instances[0].tabs[0].tab_nr == 2
    assert overview.desktop_icons[0].name == "Trash"
    assert overview.installed_programs[0].executable_path == "calc.exe"
    assert overview.taskbar_icons is None


def test_defaults_and_unknown_keys():
    assert ActionResponse.from_dict({}) == ActionResponse(success=False)
    assert SimpleResponse.from_dict({"extra": 1}).success is True
    assert ActionResponse.from_dict(None) is None
    res = ActionResponse.from_dict({"success": True, "resultValue": "{\"a\": 1}"})
    assert res.result_value == "{\"a\": 1}"


def test_enums_serialize_to_wire_values():
    assert MechanismType.SCREEN_GRASP2 == "screengrasp2"
    assert MechanismType("qwen25-vl-72b") is MechanismType.QWEN25_VL_72B
