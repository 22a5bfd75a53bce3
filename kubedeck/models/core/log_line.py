"""Parsed log line model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LogLineInfo:
    """A single log line split into source prefix, level and content.

    Attributes:
        original_line: The raw line as received.
        source_prefix: ``"<pod>/<container>"`` when the line carried a
            kubectl ``--prefix`` marker, otherwise empty.
        instance_name: Pod part of the prefix.
        container_name: Container part of the prefix.
        content: Line body with the prefix removed.
        level: Upper-cased severity keyword, or empty when none was found.
        is_json: Whether the content looks like a JSON object or array.
    """

    original_line: str
    source_prefix: str = ""
    instance_name: str = ""
    container_name: str = ""
    content: str = ""
    level: str = ""
    is_json: bool = False
