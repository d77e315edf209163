"""Command line entry points."""

from .parse import parse_cmd
from .typedef import typedef_cmd

__all__ = ["typedef_cmd", "parse_cmd"]
