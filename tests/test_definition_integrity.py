from __future__ import annotations

from pathlib import Path

import pytest

from webweaver.data import paths
from webweaver.data.json_loader import load_json
from webweaver.data.repositories import (
    EquipNamesRepository,
    FieldsRepository,
    FlagsRepository,
    ToolsRepository,
)


@pytest.fixture(scope="module")
def definitions_dir() -> Path:
    """Return the bundled definitions directory."""
    return paths.get_definitions_path()


@pytest.mark.parametrize("filename", ["fields.json", "flags.json", "tools.json", "equip_names.json"])
def test_definition_files_are_valid_json(definitions_dir: Path, filename: str) -> None:
    data = load_json(definitions_dir / filename)
    assert isinstance(data, dict), f"{filename} must contain an object"


def test_field_lists_are_present_and_labelled() -> None:
    repo = FieldsRepository()
    assert repo.names() == ["general", "current", "misc"]
    for entries in repo.all():
        assert entries
        for entry in entries:
            assert entry.key and entry.display


def test_flag_categories_and_counts() -> None:
    repo = FlagsRepository()
    assert repo.names() == ["bosses", "fleas", "maps", "abilities", "skills"]
    assert repo.get("bosses").counted_as == "defeated"
    assert repo.get("fleas").counted_as == "saved"
    assert {repo.get(name).counted_as for name in ("maps", "abilities", "skills")} == {"unlocked"}
    assert len(repo.get("bosses").entries) >= 30
    assert 25 <= len(repo.get("maps").entries) <= 35


@pytest.mark.parametrize("name", ["bosses", "maps", "abilities", "skills"])
def test_iconed_flag_categories_use_png_icons(name: str) -> None:
    for entry in FlagsRepository().get(name).entries:
        assert entry.icon is not None and entry.icon.endswith(".png"), entry.key


def test_tool_catalog_is_consistent() -> None:
    repo = ToolsRepository()
    tools = repo.all()
    assert 50 <= len(tools) <= 70
    assert {tool.category for tool in tools} == {"Red", "Blue", "Yellow"}
    assert all(tool.icon.endswith(".png") for tool in tools)

    members = [member for upgrade_set in repo.upgrade_sets() for member in upgrade_set.members]
    assert len(members) == len(set(members))
    assert not set(members) & repo.other_tool_keys()


def test_equip_names_cover_every_skill_slot_value() -> None:
    repo = EquipNamesRepository()
    for name in ("Silk Spear", "Thread Sphere", "Parry", "Silk Dart", "Silk Bomb", "Finger Blades"):
        entry = repo.find(name)
        assert entry is not None and entry.is_skill
    tool_keys = {tool.key for tool in ToolsRepository().all()}
    assert not tool_keys & set(repo.names())
