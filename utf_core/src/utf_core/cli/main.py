"""Typer-based command line interface for utf-core."""
from __future__ import annotations

from array import array
from pathlib import Path
from typing import Optional

import structlog
import typer

from ..buffers import new_unit_buffer, units_from_bytes, units_to_bytes
from ..config import AppConfig, load_config
from ..decoder import utf8_decode
from ..encoder import encode_string, utf16_encode
from ..errors import UtfCoreError
from ..logging import configure_logging
from ..sizer import utf8_count, utf16_count
from ..surrogates import UnitKind, iter_classified

app = typer.Typer(help="Convert text between UTF-16 code units and UTF-8")
logger = structlog.get_logger(__name__)


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(ctx.obj.logging.normalized_level(), fmt=ctx.obj.logging.format)


def _byteorder(ctx: typer.Context, override: Optional[str]) -> str:
    config: AppConfig = ctx.obj
    return (override or config.output.byteorder).lower()


def _read_units(ctx: typer.Context, path: Path, byteorder: Optional[str]) -> array:
    try:
        return units_from_bytes(path.read_bytes(), _byteorder(ctx, byteorder))
    except (UtfCoreError, ValueError) as exc:
        typer.echo(f"{path}: {exc}", err=True)
        raise typer.Exit(code=2) from exc


_BYTEORDER_OPTION = typer.Option(None, "--byteorder", help="Byte order of the UTF-16 data: little|big")


@app.command("count-utf8")
def count_utf8(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., exists=True, readable=True),
    byteorder: Optional[str] = _BYTEORDER_OPTION,
) -> None:
    """Print the UTF-8 length of a raw UTF-16 file."""
    typer.echo(utf8_count(_read_units(ctx, input_path, byteorder)))


@app.command()
def decode(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., exists=True, readable=True),
    output: Path = typer.Option(..., "-o", "--output", help="Write UTF-8 output here"),
    byteorder: Optional[str] = _BYTEORDER_OPTION,
) -> None:
    """Convert a raw UTF-16 file to UTF-8."""
    units = _read_units(ctx, input_path, byteorder)
    logger.info("cli.decode.start", path=str(input_path), units=len(units))
    data = utf8_decode(units)
    replaced = sum(1 for result in iter_classified(units) if result.kind is UnitKind.INVALID)
    if replaced:
        logger.warning("cli.decode.replaced", path=str(input_path), replaced=replaced)
    output.write_bytes(data)
    logger.info("cli.decode.done", path=str(output), size=len(data))
    typer.echo(f"{len(data)} bytes written to {output}")


@app.command("count-utf16")
def count_utf16(input_path: Path = typer.Argument(..., exists=True, readable=True)) -> None:
    """Print the UTF-16 length of a UTF-8 file."""
    typer.echo(utf16_count(input_path.read_bytes()))


@app.command()
def encode(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., exists=True, readable=True),
    output: Path = typer.Option(..., "-o", "--output", help="Write raw UTF-16 output here"),
    byteorder: Optional[str] = _BYTEORDER_OPTION,
) -> None:
    """Convert a UTF-8 file to raw UTF-16."""
    order = _byteorder(ctx, byteorder)
    source = input_path.read_bytes()
    logger.info("cli.encode.start", path=str(input_path), size=len(source))
    dst = new_unit_buffer(utf16_count(source))
    try:
        written = utf16_encode(dst, source)
        payload = units_to_bytes(dst[:written], order)
    except (UtfCoreError, ValueError) as exc:
        logger.error("cli.encode.failed", path=str(input_path), error=str(exc))
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    output.write_bytes(payload)
    logger.info("cli.encode.done", path=str(output), units=written)
    typer.echo(f"{written} units written to {output}")


@app.command()
def inspect(ctx: typer.Context, text: str = typer.Argument(...)) -> None:
    """Print the UTF-16 code units of TEXT."""
    config: AppConfig = ctx.obj
    units = encode_string(text)
    if config.output.unit_format == "dec":
        typer.echo(" ".join(str(unit) for unit in units))
    else:
        typer.echo(" ".join(f"0x{unit:04X}" for unit in units))


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
