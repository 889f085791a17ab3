"""Exporters for converting collected dependencies to output formats."""

from .plain_exporter import to_plain
from .ascii_exporter import to_ascii
from .json_exporter import to_json

__all__ = ["to_plain", "to_ascii", "to_json"]
