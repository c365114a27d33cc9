import json
from pathlib import Path
from types import SimpleNamespace

import pytest

from webweaver.data.repositories import ToolsRepository
from webweaver.domain.defs import UpgradeSetDef
from webweaver.domain.records import ToolRecord
from webweaver.services.tool_service import (
    ToolService,
    choose_representative,
    collapse_upgrade_sets,
    partition_other_tools,
)


def _tool_entry(name: str, *, unlocked: bool = False, seen: bool = False, selected: bool = False) -> dict:
    return {
        "Name": name,
        "Data": {"IsUnlocked": unlocked, "HasBeenSeen": seen, "HasBeenSelected": selected},
    }


def _record(*entries: dict) -> dict:
    return {"Tools": {"savedData": list(entries)}}


def _find(tools, key: str) -> ToolRecord:
    return next(tool for tool in tools if tool.key == key)


def test_empty_record_enumerates_catalog_minus_grouping() -> None:
    repo = ToolsRepository()
    result = ToolService(tools_repo=repo).project({})

    sets = repo.upgrade_sets()
    member_count = sum(len(upgrade_set.members) for upgrade_set in sets)
    expected = len(repo.all()) - len(repo.other_tool_keys()) - member_count + len(sets)
    assert result.stats.total == expected
    assert result.stats.unlocked == 0
    assert len(result.tools) == expected
    assert len(result.other_tools) == len(repo.other_tool_keys())


def test_unlock_state_is_read_from_saved_data() -> None:
    record = _record(
        _tool_entry("Straight Pin", unlocked=True, seen=True),
        _tool_entry("Tri Pin", unlocked=True),
    )
    result = ToolService().project(record)

    straight_pin = _find(result.tools, "Straight Pin")
    assert straight_pin.unlocked is True
    assert straight_pin.seen is True
    assert straight_pin.selected is False
    assert straight_pin.category == "Red"
    assert straight_pin.icon == "T_straight_pin.png"
    assert result.stats.unlocked == 2
    assert result.stats.seen == 1


def test_namespace_tool_data_is_supported() -> None:
    compass = SimpleNamespace(
        Name="Compass", Data=SimpleNamespace(IsUnlocked=True, HasBeenSeen=True, HasBeenSelected=True)
    )
    record = SimpleNamespace(Tools=SimpleNamespace(savedData=[compass]))

    result = ToolService().project(record)
    tool = _find(result.tools, "Compass")
    assert (tool.unlocked, tool.seen, tool.selected) == (True, True, True)


def test_unknown_save_entries_do_not_add_tools() -> None:
    baseline = ToolService().project({})
    result = ToolService().project(_record(_tool_entry("Not A Real Tool", unlocked=True)))
    assert result.stats == baseline.stats
    assert all(tool.key != "Not A Real Tool" for tool in result.tools)


@pytest.mark.parametrize(
    "record",
    [
        {"Tools": None},
        {"Tools": {"savedData": "broken"}},
        {"Tools": {"savedData": [None, 5, "x", {"Data": {"IsUnlocked": True}}]}},
        {"Tools": {"savedData": [{"Name": "Compass", "Data": "oops"}]}},
    ],
)
def test_malformed_tool_data_projects_as_locked(record: dict) -> None:
    result = ToolService().project(record)
    assert result.stats.unlocked == 0


def test_preferred_tier_wins_when_both_unlocked() -> None:
    record = _record(
        _tool_entry("Curve Claws", unlocked=True),
        _tool_entry("Curve Claws Upgraded", unlocked=True),
    )
    result = ToolService().project(record)

    curve = next(tool for tool in result.tools if tool.upgrade_set_name == "Curveclaw")
    assert curve.key == "Curve Claws Upgraded"
    assert curve.is_upgrade_set is True
    assert [variant.key for variant in curve.variants] == ["Curve Claws", "Curve Claws Upgraded"]
    assert curve.variant_labels == ("Curveclaw", "Curvesickle")
    assert all(tool.key != "Curve Claws" for tool in result.tools)


def test_locked_set_shows_base_tier() -> None:
    result = ToolService().project({})
    mirror = next(tool for tool in result.tools if tool.upgrade_set_name == "Claw Mirror")
    assert mirror.key == "Dazzle Bind"
    assert mirror.unlocked is False


def test_variant_set_uses_label_overrides_and_first_unlocked() -> None:
    record = _record(
        _tool_entry("WebShot Architect", unlocked=True),
        _tool_entry("WebShot Weaver", unlocked=True),
    )
    result = ToolService().project(record)
    silkshot = next(tool for tool in result.tools if tool.upgrade_set_name == "Silkshot")

    assert silkshot.key == "WebShot Architect"
    assert silkshot.variant_labels == ("Forge Daughter", "Twelfth Architect", "Mount Fay")


def test_other_tools_are_flagged_and_excluded_from_stats() -> None:
    record = _record(_tool_entry("Flea Charm", unlocked=True))
    result = ToolService().project(record)

    flea_charm = _find(result.other_tools, "Flea Charm")
    assert flea_charm.is_other is True
    assert flea_charm.unlocked is True
    assert result.stats.unlocked == 0
    assert all(not tool.is_other for tool in result.tools)


def test_set_record_keeps_position_of_first_member() -> None:
    records = [
        ToolRecord(key="a", display="A", category="Red", icon="a.png"),
        ToolRecord(key="b", display="B", category="Red", icon="b.png"),
        ToolRecord(key="c", display="C", category="Red", icon="c.png", unlocked=True),
        ToolRecord(key="d", display="D", category="Red", icon="d.png"),
    ]

    collapsed = collapse_upgrade_sets(records, [UpgradeSetDef(name="BC", members=("b", "c"), preferred="b")])
    assert [record.key for record in collapsed] == ["a", "c", "d"]
    assert collapsed[1].upgrade_set_name == "BC"


def test_choose_representative_prefers_unlocked_preferred() -> None:
    base = ToolRecord(key="base", display="Base", category="Blue", icon="b.png", unlocked=True)
    upgraded = ToolRecord(key="up", display="Up", category="Blue", icon="u.png", unlocked=True)
    assert choose_representative([base, upgraded], "up") is upgraded
    assert choose_representative([base, upgraded], None) is base
    locked_up = ToolRecord(key="up", display="Up", category="Blue", icon="u.png")
    assert choose_representative([base, locked_up], "up") is base


def test_partition_other_tools() -> None:
    records = [
        ToolRecord(key="a", display="A", category="Red", icon="a.png"),
        ToolRecord(key="b", display="B", category="Red", icon="b.png"),
    ]
    counted, other = partition_other_tools(records, {"b"})
    assert [record.key for record in counted] == ["a"]
    assert [record.key for record in other] == ["b"]
    assert other[0].is_other is True


def test_custom_catalog(tmp_path: Path) -> None:
    payload = {
        "tools": [
            {"key": "x", "display": "X", "category": "Red", "icon": "x.png"},
            {"key": "x2", "display": "X2", "category": "Red", "icon": "x2.png"},
            {"key": "y", "display": "Y", "category": "Yellow", "icon": "y.png"},
        ],
        "upgrade_sets": [{"name": "X Set", "members": ["x", "x2"], "preferred": "x2"}],
        "other_tools": ["y"],
    }
    (tmp_path / "tools.json").write_text(json.dumps(payload), encoding="utf-8")
    service = ToolService(tools_repo=ToolsRepository(base_path=tmp_path))

    result = service.project(_record(_tool_entry("x", unlocked=True)))
    assert [tool.key for tool in result.tools] == ["x"]
    assert result.stats.total == 1
    assert result.stats.unlocked == 1
    assert [tool.key for tool in result.other_tools] == ["y"]


def test_projection_is_repeatable() -> None:
    record = _record(_tool_entry("Compass", unlocked=True))
    service = ToolService()
    assert service.project(record) == service.project(record)


def test_later_duplicate_entry_replaces_earlier() -> None:
    record = _record(
        _tool_entry("Compass", unlocked=False),
        _tool_entry("Compass", unlocked=True, seen=True),
    )
    compass = _find(ToolService().project(record).tools, "Compass")
    assert compass.unlocked is True
    assert compass.seen is True


def test_build_lookup_skips_unnamed_entries() -> None:
    first = {"Name": "Compass", "Data": {}}
    second = {"Name": "Compass", "Data": {"IsUnlocked": True}}
    lookup = ToolService().build_lookup([first, {"Name": ""}, {"Data": {}}, second])
    assert lookup == {"Compass": second}
