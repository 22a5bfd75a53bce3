"""Core data models."""

from kubedeck.models.core.item import Item, header_name, header_target
from kubedeck.models.core.log_line import LogLineInfo

__all__ = ["Item", "LogLineInfo", "header_name", "header_target"]
