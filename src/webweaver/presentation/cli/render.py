"""Text rendering of a ParsedSnapshot for the terminal."""
from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from webweaver.domain.records import EquippedToolInfo, FlagCategory, ParsedField, ToolRecord, ToolsResult
from webweaver.domain.snapshot import FLAG_CATEGORIES, ParsedSnapshot
from webweaver.presentation.formatting import format_number, format_percent, format_play_time

_EMPTY = "-"


def _format_game_mode(value: Any) -> str:
    return "Steel Soul" if value else "Classic"


def _format_yes_no(value: Any) -> str:
    return "Yes" if value else "No"


VALUE_FORMATTERS: Dict[str, Callable[[Any], str]] = {
    "playTime": format_play_time,
    "completionPercentage": format_percent,
    "permadeathMode": _format_game_mode,
    "atBench": _format_yes_no,
    "geo": format_number,
    "ShellShards": format_number,
}


def format_field_value(key: str, value: Any) -> str:
    """Return the display text for one raw field value."""
    formatter = VALUE_FORMATTERS.get(key)
    if formatter is not None:
        try:
            return formatter(value)
        except (TypeError, ValueError, OverflowError):
            return str(value)
    if value is None or value == "":
        return _EMPTY
    return str(value)


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_fields(title: str, fields: Mapping[str, ParsedField]) -> None:
    render_heading(title)
    width = max((len(parsed.display) for parsed in fields.values()), default=0)
    for key, parsed in fields.items():
        print(f"{parsed.display.ljust(width)} : {format_field_value(key, parsed.value)}")


def _check(value: bool) -> str:
    return "[x]" if value else "[ ]"


def render_flags(title: str, category: FlagCategory) -> None:
    render_heading(f"{title} ({category.counted}/{category.total} {category.counted_as})")
    for item in category.items:
        print(f"{_check(item.value)} {item.display}")


def describe_tool(tool: ToolRecord) -> str:
    """One-line description of a tool, listing variants for upgrade sets."""
    line = f"{_check(tool.unlocked)} {tool.display} ({tool.category})"
    if tool.is_upgrade_set:
        variants = ", ".join(
            f"{label}{'*' if variant.unlocked else ''}"
            for label, variant in zip(tool.variant_labels, tool.variants)
        )
        line += f" [{tool.upgrade_set_name}: {variants}]"
    return line


def render_tools(result: ToolsResult, *, show_other: bool = False) -> None:
    stats = result.stats
    render_heading(f"Tools ({stats.unlocked}/{stats.total} unlocked, {stats.seen} seen)")
    for tool in result.tools:
        print(describe_tool(tool))
    if show_other and result.other_tools:
        render_heading("Other Tools (not counted)")
        for tool in result.other_tools:
            print(describe_tool(tool))


def describe_equipped(info: EquippedToolInfo) -> str:
    prefix = f"{info.slot_name}: " if info.slot_name else ""
    return f"{prefix}{info.display} ({info.category})"


def render_equipped(snapshot: ParsedSnapshot) -> None:
    equipped = snapshot.equipped_tools
    crest = equipped.crest_id or "None"
    render_heading(f"Equipped Tools (crest: {crest})")
    if not equipped.equipped_tools and not equipped.extra_equipped_tools:
        print("Nothing equipped.")
        return
    for info in equipped.equipped_tools:
        print(describe_equipped(info))
    for info in equipped.extra_equipped_tools:
        print(describe_equipped(info))


def render_snapshot(snapshot: ParsedSnapshot, *, show_other: bool = False) -> None:
    """Print every category of ``snapshot`` as grouped text sections."""
    render_fields("General", snapshot.general)
    render_fields("Current Stats", snapshot.current)
    render_fields("Misc", snapshot.misc)
    for name in FLAG_CATEGORIES:
        render_flags(name.capitalize(), snapshot.category(name))
    render_tools(snapshot.tools, show_other=show_other)
    render_equipped(snapshot)
