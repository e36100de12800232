import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from shapekit.config import resolve_log_level, resolve_text_style
from shapekit.core.boxing import box_shape, load_boxed_value, unbox_shape
from shapekit.core.text import format_shape, parse_shape
from shapekit.errors import ShapeError
from shapekit.models import Shape, make_shape

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="shapekit",
    help="Shapekit CLI — parse, format and box (width, height, depth) shapes.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
err_console = Console(stderr=True)

# Lets negative numbers such as "-1" through as arguments instead of unknown options.
_NUMERIC_ARGS = {"ignore_unknown_options": True}

StyleOption = Annotated[
    str | None,
    typer.Option("--style", help="Output style: braces or labeled. Defaults to $SHAPEKIT_TEXT_STYLE or braces."),
]


def _configure_logging(level: str | None) -> None:
    resolved_level = resolve_log_level(level)
    root_logger = logging.getLogger()
    for handler in [h for h in root_logger.handlers if isinstance(h, RichHandler)]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(RichHandler(console=err_console, show_path=False))
    root_logger.setLevel(resolved_level)


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)
    return typer.Exit(1)


def _print_plain(text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _render_shape(shape: Shape) -> None:
    table = Table(show_lines=False)
    for header in ("width", "height", "depth"):
        table.add_column(header)
    table.add_row(*(str(v) for v in shape.as_tuple()))
    console.print(table)


@app.callback()
def main_callback(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Log level. Defaults to $SHAPEKIT_LOG_LEVEL or WARNING.")
    ] = None,
) -> None:
    try:
        _configure_logging(log_level)
    except ValueError as exc:
        raise _fail(str(exc)) from exc


@app.command("format", context_settings=_NUMERIC_ARGS)
def format_command(
    width: Annotated[int, typer.Argument(help="Width of the shape.")],
    height: Annotated[int, typer.Argument(help="Height of the shape.")],
    depth: Annotated[int, typer.Argument(help="Depth of the shape.")],
    style: StyleOption = None,
) -> None:
    """Print the text form of a shape."""
    try:
        resolved_style = resolve_text_style(style)
    except ValueError as exc:
        raise _fail(str(exc)) from exc
    _print_plain(format_shape(make_shape(width, height, depth), resolved_style))


@app.command("parse", context_settings=_NUMERIC_ARGS)
def parse_command(
    text: Annotated[str, typer.Argument(help="Shape text, e.g. '{3, 4, 5}' or '{height=4; width=3; depth=5}'.")],
    style: StyleOption = None,
) -> None:
    """Parse shape text and show its dimensions."""
    try:
        resolved_style = resolve_text_style(style)
        shape = parse_shape(text)
    except ValueError as exc:
        raise _fail(str(exc)) from exc
    _render_shape(shape)
    _print_plain(format_shape(shape, resolved_style))


@app.command("box")
def box_command(
    text: Annotated[str, typer.Argument(help="Shape text to box.")],
) -> None:
    """Print the boxed JSON value of a shape."""
    try:
        boxed = box_shape(parse_shape(text))
    except ShapeError as exc:
        raise _fail(str(exc)) from exc
    _print_plain(boxed.model_dump_json())


@app.command("unbox")
def unbox_command(
    data: Annotated[str, typer.Argument(help='Boxed JSON value, e.g. \'{"kind": "shape", "value": {...}}\'.')],
    style: StyleOption = None,
) -> None:
    """Print the shape held by a boxed JSON value."""
    try:
        resolved_style = resolve_text_style(style)
    except ValueError as exc:
        raise _fail(str(exc)) from exc
    try:
        boxed = load_boxed_value(data)
    except ValidationError as exc:
        logger.debug("Could not decode boxed value %r: %s", data, exc)
        raise _fail(f"Invalid boxed value: {exc.error_count()} validation error(s)") from exc
    try:
        shape = unbox_shape(boxed)
    except ShapeError as exc:
        raise _fail(str(exc)) from exc
    _print_plain(format_shape(shape, resolved_style))


def main() -> None:
    app()
