from shapekit.core.boxing import (
    BoolBox,
    BoxedValue,
    FloatBox,
    IntBox,
    ShapeBox,
    StrBox,
    box,
    box_shape,
    dump_boxed_values,
    load_boxed_value,
    load_boxed_values,
    unbox,
    unbox_shape,
)
from shapekit.core.text import TextStyle, format_shape, parse_shape
from shapekit.errors import MalformedShapeTextError, ShapeError, TypeMismatchError
from shapekit.models import IDENTITY, ZERO, Shape, ShapeLabel, make_shape, shapes_equal

__all__ = [
    "IDENTITY",
    "ZERO",
    "BoolBox",
    "BoxedValue",
    "FloatBox",
    "IntBox",
    "MalformedShapeTextError",
    "Shape",
    "ShapeBox",
    "ShapeError",
    "ShapeLabel",
    "StrBox",
    "TextStyle",
    "TypeMismatchError",
    "box",
    "box_shape",
    "dump_boxed_values",
    "format_shape",
    "load_boxed_value",
    "load_boxed_values",
    "make_shape",
    "parse_shape",
    "shapes_equal",
    "unbox",
    "unbox_shape",
]
