"""Log line classification and Rich markup rendering.

Turns raw ``kubectl logs`` output into leveled, per-source colored markup.
Every helper falls back to the original text when a heuristic does not
apply, so formatting never loses log content.
"""

from __future__ import annotations

import json

from rich.markup import escape

from kubedeck.constants.patterns import LOG_LEVEL_PATTERN, LOG_PREFIX_PATTERN
from kubedeck.constants.values import (
    COLOR_DEFAULT,
    COLOR_ERROR,
    COLOR_MUTED,
    COLOR_SECONDARY,
    COLOR_TRACE,
    COLOR_WARNING,
    SOURCE_COLOR_PALETTE,
    SOURCE_PREFIX_ICON,
)
from kubedeck.models.core.log_line import LogLineInfo


_LEVEL_COLORS: dict[str, str] = {
    "FATAL": COLOR_ERROR,
    "ERROR": COLOR_ERROR,
    "ERR": COLOR_ERROR,
    "WARN": COLOR_WARNING,
    "WARNING": COLOR_WARNING,
    "INFO": COLOR_SECONDARY,
    "DEBUG": COLOR_MUTED,
    "TRACE": COLOR_TRACE,
}

_JSON_INDENT = 2


def _looks_like_json(text: str) -> bool:
    trimmed = text.strip()
    return (trimmed.startswith("{") and trimmed.endswith("}")) or (
        trimmed.startswith("[") and trimmed.endswith("]")
    )


def parse_log_line(line: str) -> LogLineInfo:
    """Split a raw log line into prefix, level and content.

    Recognises the ``[pod/<pod>/<container>] <content>`` prefix written by
    ``kubectl logs --prefix``. The level is the first severity keyword found
    in the content, upper-cased.
    """
    instance = container = prefix = ""
    content = line
    match = LOG_PREFIX_PATTERN.match(line)
    if match:
        instance, container, content = match.group(2), match.group(3), match.group(4)
        prefix = f"{instance}/{container}"

    level_match = LOG_LEVEL_PATTERN.search(content)
    level = level_match.group(1).upper() if level_match else ""

    return LogLineInfo(
        original_line=line,
        source_prefix=prefix,
        instance_name=instance,
        container_name=container,
        content=content,
        level=level,
        is_json=_looks_like_json(content),
    )


def source_color(name: str) -> str:
    """Stable palette color for a log source, identical across sessions."""
    palette_size = len(SOURCE_COLOR_PALETTE)
    value = 0
    for char in name:
        value = (value * 31 + ord(char)) % palette_size
    return SOURCE_COLOR_PALETTE[value]


def level_color(level: str) -> str:
    return _LEVEL_COLORS.get(level.strip().upper(), COLOR_DEFAULT)


def shorten_source(instance_name: str) -> str:
    """Shorten ``<workload>-<rs hash>-<suffix>`` to ``[<rs hash>-<suffix>]``.

    The workload part is redundant while viewing that workload. Names with
    fewer than three dash-separated parts are shown whole.
    """
    parts = instance_name.split("-")
    if len(parts) < 3:
        return f"[{instance_name}]"
    return f"[{parts[-2]}-{parts[-1]}]"


def format_source_prefix(instance_name: str) -> str:
    color = source_color(instance_name)
    label = escape(f"{SOURCE_PREFIX_ICON} {shorten_source(instance_name)}")
    return f"[bold {color}]{label}[/]"


def colorize_levels(text: str) -> str:
    """Escape ``text`` and wrap every severity keyword in its color."""
    parts: list[str] = []
    last = 0
    for match in LOG_LEVEL_PATTERN.finditer(text):
        parts.append(escape(text[last:match.start()]))
        keyword = match.group(0)
        parts.append(f"[bold {level_color(keyword)}]{escape(keyword)}[/]")
        last = match.end()
    parts.append(escape(text[last:]))
    return "".join(parts)


def pretty_print_json(text: str) -> str:
    """Re-indent JSON text, returning it unchanged when it does not parse."""
    try:
        data = json.loads(text)
    except ValueError:
        return text
    return json.dumps(data, indent=_JSON_INDENT, ensure_ascii=False)


def _format_line(line: str) -> str:
    info = parse_log_line(line)
    prefix = format_source_prefix(info.instance_name) if info.source_prefix else ""

    if info.is_json:
        body = escape(pretty_print_json(info.content))
    elif prefix:
        body = colorize_levels(info.content)
    else:
        body = colorize_levels(line)

    return f"{prefix} {body}" if prefix else body


def process_log_content(text: str, format_mode: bool) -> str:
    """Render raw log text for display.

    Args:
        text: Raw log output, one entry per line.
        format_mode: When False the text is returned unchanged.

    Returns:
        The original text in raw mode, otherwise Rich markup with source
        prefixes colored per pod, JSON re-indented and levels highlighted.
        Blank lines are kept as they are.
    """
    if not format_mode:
        return text

    rendered: list[str] = []
    for line in text.split("\n"):
        if not line.strip():
            rendered.append(line)
            continue
        rendered.append(_format_line(line))
    return "\n".join(rendered)
