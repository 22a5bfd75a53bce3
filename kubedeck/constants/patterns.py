"""Regex patterns for data parsing."""

import re

LOG_LEVEL_PATTERN = re.compile(
    r"\b(FATAL|ERROR|ERR|WARN|WARNING|INFO|DEBUG|TRACE)\b", re.IGNORECASE
)
# kubectl --prefix format: [pod/<pod>/<container>] <content>
LOG_PREFIX_PATTERN = re.compile(r"^\[([^/]+)/([^/]+)/([^\]]+)\]\s*(.*)$")
K8S_NAME_PATTERN = re.compile(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?$")
POSITIVE_INTEGER_PATTERN = re.compile(r"^[0-9]+$")

__all__ = [
    "K8S_NAME_PATTERN",
    "LOG_LEVEL_PATTERN",
    "LOG_PREFIX_PATTERN",
    "POSITIVE_INTEGER_PATTERN",
]
