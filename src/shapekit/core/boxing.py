"""Boxed values: a closed, tagged union so shapes can share a container with scalars.

Each box is a frozen pydantic model carrying a ``kind`` discriminator, which lets a
heterogeneous list of boxes round-trip through JSON without losing member types.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from shapekit.errors import TypeMismatchError
from shapekit.models import Shape

logger = logging.getLogger(__name__)


class _Box(BaseModel):
    # inf/nan are written as Infinity/NaN so they load back instead of turning into null.
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")


class BoolBox(_Box):
    kind: Literal["bool"] = "bool"
    value: bool


class IntBox(_Box):
    kind: Literal["int"] = "int"
    value: int


class FloatBox(_Box):
    kind: Literal["float"] = "float"
    value: float


class StrBox(_Box):
    kind: Literal["str"] = "str"
    value: str


class ShapeBox(_Box):
    kind: Literal["shape"] = "shape"
    value: Shape


BoxedValue = Annotated[BoolBox | IntBox | FloatBox | StrBox | ShapeBox, Field(discriminator="kind")]

_BOX_TYPES = (BoolBox, IntBox, FloatBox, StrBox, ShapeBox)
_boxed_adapter: TypeAdapter[BoxedValue] = TypeAdapter(BoxedValue)
_boxed_list_adapter: TypeAdapter[list[BoxedValue]] = TypeAdapter(list[BoxedValue])


def box_shape(shape: Shape) -> ShapeBox:
    return ShapeBox(value=shape.model_copy())


def unbox_shape(boxed: Any) -> Shape:
    """Return the shape held by ``boxed``.

    Raises ``TypeMismatchError`` if ``boxed`` is not a ``ShapeBox``.
    """
    if isinstance(boxed, ShapeBox):
        return boxed.value
    held = boxed.kind if isinstance(boxed, _BOX_TYPES) else type(boxed).__name__
    logger.debug("Refused to unbox %s as a shape", held)
    raise TypeMismatchError(f"Boxed value holds {held!r}, not a shape")


def box(value: Any) -> BoxedValue:
    # bool is checked before int: True would otherwise box as IntBox(1).
    if isinstance(value, Shape):
        return box_shape(value)
    if isinstance(value, bool):
        return BoolBox(value=value)
    if isinstance(value, int):
        return IntBox(value=value)
    if isinstance(value, float):
        return FloatBox(value=value)
    if isinstance(value, str):
        return StrBox(value=value)
    raise TypeMismatchError(f"Cannot box value of type {type(value).__name__!r}")


def unbox(boxed: BoxedValue) -> Any:
    if not isinstance(boxed, _BOX_TYPES):
        raise TypeMismatchError(f"Expected a boxed value, got {type(boxed).__name__!r}")
    return boxed.value


def load_boxed_value(text: str) -> BoxedValue:
    return _boxed_adapter.validate_json(text)


def dump_boxed_values(values: list[BoxedValue]) -> str:
    return _boxed_list_adapter.dump_json(values).decode()


def load_boxed_values(text: str) -> list[BoxedValue]:
    return _boxed_list_adapter.validate_json(text)
