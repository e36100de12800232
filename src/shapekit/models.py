from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, model_validator

if TYPE_CHECKING:
    from shapekit.core.boxing import ShapeBox


class ShapeLabel(StrEnum):
    WIDTH = "width"
    HEIGHT = "height"
    DEPTH = "depth"


# Positional order used by as_tuple(), integer subscripts and the canonical text form.
_POSITIONAL_LABELS = (ShapeLabel.WIDTH, ShapeLabel.HEIGHT, ShapeLabel.DEPTH)


class Shape(BaseModel):
    """Immutable (width, height, depth) integer triple.

    No range checks are applied; negative and zero dimensions are valid values.
    """

    model_config = ConfigDict(frozen=True)

    width: int = 0
    height: int = 0
    depth: int = 0

    @model_validator(mode="before")
    @classmethod
    def _coerce_loose_input(cls, data: Any) -> Any:
        if isinstance(data, str):
            from shapekit.core.text import parse_shape

            return parse_shape(data).model_dump()
        if isinstance(data, Sequence) and not isinstance(data, (bytes, bytearray)):
            if len(data) != 3:
                raise ValueError(f"Expected 3 dimensions, got {len(data)}")
            return {label.value: value for label, value in zip(_POSITIONAL_LABELS, data, strict=True)}
        return data

    def __getitem__(self, key: int | str) -> int:
        """Look a dimension up by label (``"width"``) or by position in (width, height, depth)."""
        if isinstance(key, bool):
            raise KeyError(key)
        if isinstance(key, int):
            if not 0 <= key < len(_POSITIONAL_LABELS):
                raise IndexError(f"Shape index {key} out of range 0..{len(_POSITIONAL_LABELS) - 1}")
            return getattr(self, _POSITIONAL_LABELS[key].value)
        if not isinstance(key, str):
            raise KeyError(key)
        try:
            label = ShapeLabel(key.lower())
        except ValueError:
            raise KeyError(key) from None
        return getattr(self, label.value)

    def __str__(self) -> str:
        from shapekit.core.text import format_shape

        return format_shape(self)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.width, self.height, self.depth)

    def to_boxed(self) -> ShapeBox:
        from shapekit.core.boxing import box_shape

        return box_shape(self)


ZERO = Shape(width=0, height=0, depth=0)
IDENTITY = Shape(width=1, height=1, depth=1)


def make_shape(width: int, height: int, depth: int) -> Shape:
    return Shape(width=width, height=height, depth=depth)


def shapes_equal(lhs: Shape, rhs: Shape) -> bool:
    return lhs.width == rhs.width and lhs.height == rhs.height and lhs.depth == rhs.depth
