"""Human/JSON/quiet rendering of ServiceResult.

Human mode describes string results the way C demos print them::

    OK: trim
    "hi" has 2 characters length
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from lenstr.output.console import create_console, get_output

if TYPE_CHECKING:
    from lenstr.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags, taken from the global CLI options."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def describe_string(content: str, length: int) -> Text:
    """``"<content>" has <n> characters length``."""
    return Text.assemble(
        ('"', "lenstr.key"),
        (content, "lenstr.content"),
        ('"', "lenstr.key"),
        " has ",
        (str(length), "lenstr.length"),
        " characters length",
    )


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _format_quiet(result: ServiceResult) -> str:
    data = result.data
    if "content" in data:
        return str(data["content"])
    if "value" in data:
        return _scalar(data["value"])
    if "steps" in data:
        return "\n".join(
            str(step["content"]) if "content" in step else _scalar(step.get("value"))
            for step in data["steps"]
        )
    return ""


def _render_data(data: dict[str, Any]) -> list[Text]:
    lines: list[Text] = []
    if "content" in data and "length" in data:
        lines.append(describe_string(str(data["content"]), int(data["length"])))
    for step in data.get("steps", []):
        label = Text(f"  {step['label']}: ", style="lenstr.key")
        if "content" in step:
            lines.append(label + describe_string(str(step["content"]), int(step["length"])))
        else:
            lines.append(label + Text(_scalar(step.get("value"))))
    for key, value in data.items():
        if key in {"content", "length", "steps"}:
            continue
        if isinstance(value, (dict, list)):
            rendered = _json.dumps(value, separators=(",", ":"))
        else:
            rendered = _scalar(value)
        lines.append(Text(f"  {key}: ", style="lenstr.key") + Text(rendered))
    return lines


def _format_human(result: ServiceResult, *, verbose: bool) -> str:
    console = create_console()
    if result.ok:
        console.print(
            Text.assemble(("OK", "lenstr.ok"), ": ", (result.op, "lenstr.op")),
            soft_wrap=True,
        )
        for line in _render_data(result.data):
            console.print(line, soft_wrap=True)
        if verbose and result.meta and "telemetry" in result.meta:
            telemetry = _json.dumps(result.meta["telemetry"], separators=(",", ":"))
            console.print(Text("  telemetry: ", style="lenstr.key") + Text(telemetry), soft_wrap=True)
    else:
        message = result.error.message if result.error else "Unknown error"
        code = result.error.code if result.error else "ERROR"
        console.print(
            Text.assemble(
                ("ERROR", "lenstr.error"),
                ": ",
                (result.op, "lenstr.op"),
                f" [{code}] {message}",
            ),
            soft_wrap=True,
        )
    return get_output(console).rstrip("\n")


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display; human mode when *settings* is None."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet and result.ok:
        return _format_quiet(result)
    return _format_human(result, verbose=settings.verbose)
