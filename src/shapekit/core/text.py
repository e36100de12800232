"""Text codec for shapes.

Two textual forms are understood:

* canonical, ``{width, height, depth}`` such as ``"{3, 4, 5}"`` (the braces may
  be omitted when parsing);
* labeled, ``{height=H; width=W; depth=D}`` with labels in any order and missing
  labels read as 0.

``parse_shape`` is strict: anything else raises ``MalformedShapeTextError``.
"""

from __future__ import annotations

import logging
import re
from enum import StrEnum

from shapekit.errors import MalformedShapeTextError
from shapekit.models import Shape, ShapeLabel

logger = logging.getLogger(__name__)

# Single-line ASCII grammar: no Unicode digits, no line breaks.
_INT = r"[+-]?[0-9]+"
_WS = r"[ \t]*"

_TRIPLE_RE = re.compile(
    rf"{_WS}(?P<open>\{{)?{_WS}({_INT}){_WS},{_WS}({_INT}){_WS},{_WS}({_INT}){_WS}(?P<close>\}})?{_WS}"
)
_LABELED_RE = re.compile(rf"{_WS}\{{(?P<body>[^{{}}\r\n]*=[^{{}}\r\n]*)\}}{_WS}")
_ASSIGNMENT_RE = re.compile(rf"{_WS}(?P<label>[A-Za-z]+){_WS}={_WS}(?P<value>{_INT}){_WS}")

_LABELED_ORDER = (ShapeLabel.HEIGHT, ShapeLabel.WIDTH, ShapeLabel.DEPTH)


class TextStyle(StrEnum):
    BRACES = "braces"
    LABELED = "labeled"


def _reject(text: str, reason: str) -> MalformedShapeTextError:
    logger.debug("Rejected shape text %r: %s", text, reason)
    return MalformedShapeTextError(f"Malformed shape text {text!r}: {reason}")


def _parse_labeled(text: str, body: str) -> Shape:
    values: dict[str, int] = {}
    for assignment in body.split(";"):
        if not assignment.strip():
            continue
        match = _ASSIGNMENT_RE.fullmatch(assignment)
        if match is None:
            raise _reject(text, f"cannot read assignment {assignment.strip()!r}")
        try:
            label = ShapeLabel(match["label"].lower())
        except ValueError:
            raise _reject(text, f"unknown label {match['label']!r}") from None
        if label.value in values:
            raise _reject(text, f"duplicate label {label.value!r}")
        values[label.value] = int(match["value"])
    return Shape(**values)


def parse_shape(text: str) -> Shape:
    """Parse ``text`` into a ``Shape``.

    Raises ``MalformedShapeTextError`` on empty text, wrong arity, non-integer
    components, unknown or duplicate labels and trailing garbage.
    """
    match = _TRIPLE_RE.fullmatch(text)
    if match is not None:
        if (match["open"] is None) != (match["close"] is None):
            raise _reject(text, "unbalanced braces")
        width, height, depth = (int(match.group(i)) for i in (2, 3, 4))
        return Shape(width=width, height=height, depth=depth)

    match = _LABELED_RE.fullmatch(text)
    if match is not None:
        return _parse_labeled(text, match["body"])

    if not text.strip():
        raise _reject(text, "empty text")
    raise _reject(text, "expected '{width, height, depth}' or '{height=H; width=W; depth=D}'")


def format_shape(shape: Shape, style: TextStyle | str = TextStyle.BRACES) -> str:
    if TextStyle(style) is TextStyle.LABELED:
        inner = "; ".join(f"{label.value}={shape[label]}" for label in _LABELED_ORDER)
    else:
        inner = ", ".join(str(value) for value in shape.as_tuple())
    return "{" + inner + "}"
