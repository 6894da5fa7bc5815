"""Report generation for removal runs."""

from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from commonstrip.utils.constants import Constants

if TYPE_CHECKING:
    from commonstrip.removal.events import RemovalEvent, RemovalResult


def event_to_yaml_dict(event: "RemovalEvent") -> dict:
    """Convert a removal event to a plain dict for YAML output."""
    return {
        "round": event.round,
        "text": event.text,
        "target_offset": event.target_offset,
        "source_offset": event.source_offset,
        "origin_offset": event.origin_offset,
        "source_length": event.source_length,
        "target_length": event.target_length,
    }


def result_to_yaml_dict(result: "RemovalResult") -> dict:
    """Convert a run result to a plain dict for YAML output."""
    return {
        "source": result.initial_source,
        "target": result.initial_target,
        "max_length": result.max_length,
        "offset_policy": result.offset_policy.value,
        "stop_reason": result.stop_reason.value,
        "rounds": result.rounds,
        "removed_characters": result.removed_characters,
        "final_source": result.source,
        "final_target": result.target,
        "removals": [event_to_yaml_dict(event) for event in result.events],
    }


def _write_text_report(f, result: "RemovalResult") -> None:
    # Imported here to avoid a cycle with commonstrip.removal
    from commonstrip.removal.removal_logging import format_event

    f.write("COMMON SUBSTRING REMOVAL REPORT\n")
    f.write("=" * 60 + "\n\n")
    f.write(f"Source: {result.initial_source!r}\n")
    f.write(f"Target: {result.initial_target!r}\n")
    f.write(f"Max pattern length: {result.max_length}\n")
    f.write(f"Offset policy: {result.offset_policy.value}\n")
    f.write(f"Removals: {result.rounds}\n")
    f.write(f"Characters removed from each string: {result.removed_characters}\n")
    f.write(f"Stopped: {result.stop_reason.value}\n\n")

    for event in result.events:
        f.write(f"[{event.round}] {format_event(event)}\n")

    f.write("\n")
    f.write(f"Final source: {result.source!r}\n")
    f.write(f"Final target: {result.target!r}\n")


def write_report(result: "RemovalResult", path: str, fmt: str = "yaml") -> Path:
    """Write a report of result to path.

    Args:
        result: Completed run
        path: Output file; parent directories are created
        fmt: "yaml" or "text"

    Returns:
        Path of the written report
    """
    if fmt not in Constants.REPORT_FORMATS:
        raise ValueError(f"Invalid report format: {fmt}")

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        if fmt == "yaml":
            yaml.safe_dump(
                result_to_yaml_dict(result),
                f,
                sort_keys=False,
                allow_unicode=True,
            )
        else:
            _write_text_report(f, result)

    return output_path
