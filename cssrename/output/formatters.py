import json
from typing import Any


def format_output(data: Any, output_format: str = "plain") -> str:
    if output_format == "json":
        return json.dumps(data, indent=2)
    return format_plain(data)


def format_plain(data: Any) -> str:
    if data is None:
        return ""

    if isinstance(data, str):
        return data

    if isinstance(data, dict):
        if "totalChanges" in data and "changes" in data:
            return format_summary(data)

        return json.dumps(data, indent=2)

    if isinstance(data, list):
        if not data:
            return "No results"

        first = data[0]

        if isinstance(first, str):
            return "\n".join(data)

        if "oldClass" in first and "newClass" in first and "file" not in first:
            return format_change_pairs(data)

        if "file" in first and "line" in first:
            return format_diffs(data)

    return json.dumps(data, indent=2)


def format_change_pairs(changes: list[dict]) -> str:
    width = max(len(c["oldClass"]) for c in changes)
    return "\n".join(f"{c['oldClass']:<{width}} -> {c['newClass']}" for c in changes)


def format_diffs(diffs: list[dict]) -> str:
    return "\n".join(
        f"{d['file']}:{d['line']} {d['oldClass']} -> {d['newClass']}" for d in diffs
    )


def format_summary(summary: dict) -> str:
    total = summary["totalChanges"]
    files = summary.get("modifiedFiles", [])
    if not total:
        return "No changes"

    lines = [f"{total} change(s) in {len(files)} file(s):"]
    lines.extend(f"  {f}" for f in files)
    if summary["changes"]:
        lines.append("")
        lines.append(format_diffs(summary["changes"]))
    return "\n".join(lines)
