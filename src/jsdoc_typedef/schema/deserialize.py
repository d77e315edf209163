"""Parse JSDoc @typedef comments back into schemas.

Only the comment format produced by ``serialize`` is understood. Field and
type names may not contain ``{ } , : < >``; malformed input yields a partial
result rather than an error. Regular expressions of string subtypes are not
part of the rendered text, so those come back as plain ``"string"`` types.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from .types import STRING, StructType

logger = logging.getLogger(__name__)

TYPEDEF_COMMENT = re.compile(
    r"/\*\*\s+\*\s+(?P<description>.*?)\s+\*\s+@typedef\s+"
    r"\{(?P<type>.*?)\}\s+(?P<name>\w+)\s+\*/",
    re.DOTALL,
)
ARRAY_TYPE = re.compile(r"array<(?P<type>.*)>", re.IGNORECASE)
DECORATION = re.compile(r"^\s*\* ?")

# Pending key of the outermost frame, which holds the whole literal.
_ROOT = object()


@dataclass
class _Frame:
    node: dict = field(default_factory=dict)
    key: Any = None
    parent_key: Any = None
    arrays: int = 0


def deserialize(text: str) -> dict[str, StructType]:
    """Translate typedef comments into a registry of structural types.

    Args:
        text: One or more comments as produced by ``serialize``

    Returns:
        Dict mapping each type name to its description and schema
    """
    registry = {}
    for match in TYPEDEF_COMMENT.finditer(text):
        name = match.group("name")
        registry[name] = StructType(
            description=_strip_decoration(match.group("description")),
            schema=parse_type_literal(match.group("type")),
        )
        logger.debug("Deserialized typedef %s", name)
    return registry


def parse_type_literal(raw: str) -> Any:
    """Parse the type expression between the braces of a @typedef tag."""
    literal = _strip_decoration(raw).strip()
    if literal.lower() == STRING:
        return STRING

    frames = [_Frame(key=_ROOT)]
    buffer = ""
    for char in literal:
        frame = frames[-1]
        if char == ":":
            frame.key = buffer
            buffer = ""
        elif char in ",\n":
            _commit(frame, buffer)
            buffer = ""
        elif char == "{":
            frames.append(
                _Frame(parent_key=frame.key, arrays=_count_arrays(buffer))
            )
            buffer = ""
        elif char == "}":
            _commit(frame, buffer)
            buffer = ""
            if len(frames) > 1:
                _close(frames)
        elif not char.isspace():
            buffer += char

    _commit(frames[-1], buffer)
    while len(frames) > 1:
        _close(frames)
    return frames[0].node.get(_ROOT, {})


def _strip_decoration(text: str) -> str:
    lines = text.split("\n")
    return "\n".join(lines[:1] + [DECORATION.sub("", line) for line in lines[1:]])


def _parse_scalar(text: str) -> Any:
    match = ARRAY_TYPE.fullmatch(text)
    if match:
        return [_parse_scalar(match.group("type"))]
    return text


def _count_arrays(prefix: str) -> int:
    return prefix.lower().count("array<")


def _commit(frame: _Frame, buffer: str) -> None:
    # A lone ">" closes an Array<{...}> whose object was already committed.
    if frame.key is None or not buffer.strip(">"):
        return
    frame.node[frame.key] = _parse_scalar(buffer)
    frame.key = None


def _close(frames: list) -> None:
    closed = frames.pop()
    value = closed.node
    for _ in range(closed.arrays):
        value = [value]
    parent = frames[-1]
    if closed.parent_key is not None:
        parent.node[closed.parent_key] = value
    parent.key = None
