"""CSS Unity CLI entry point: Click group with subcommands."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from css_unity import __version__
from css_unity.config import CSSUnityConfig
from css_unity.errors import CSSUnityError
from css_unity.model import OutputType
from css_unity.unity import CSSUnity

_TYPE_CHOICES = [t.value for t in OutputType]


def _input_arg(inputs: tuple[str, ...]) -> str | list[str]:
    # A single argument may itself be a comma-separated list.
    return inputs[0] if len(inputs) == 1 else list(inputs)


def _build_unity(inputs: tuple[str, ...], recursive: bool = False, **kwargs) -> CSSUnity:
    """Construct the pipeline, exiting with the error's code on bad input."""
    try:
        return CSSUnity(_input_arg(inputs), recursive=recursive, **kwargs)
    except CSSUnityError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(exc.exit_code)


def _write(text: str, output: str | None) -> None:
    if output is None:
        click.echo(text)
        return
    Path(output).write_text(text + "\n", encoding="utf-8")
    click.echo(f"Wrote {output}", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="css-unity")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
def cli(verbose: bool) -> None:
    """CSS Unity - inline stylesheet images as data URIs and MHTML."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("inputs", nargs=-1)
@click.option(
    "--type",
    "output_type",
    type=click.Choice(_TYPE_CHOICES),
    default=OutputType.UNIFIED.value,
    show_default=True,
    help="Resource forms to write",
)
@click.option("--separate", is_flag=True, help="Keep only the lines of the chosen type")
@click.option("--mhtml-uri", default=None, help="Absolute URI the stylesheet is served from")
@click.option("--recursive", is_flag=True, help="Recurse into directories (unsupported)")
@click.option("-o", "--output", default=None, help="Write to FILE instead of stdout")
def parse(
    inputs: tuple[str, ...],
    output_type: str,
    separate: bool,
    mhtml_uri: str | None,
    recursive: bool,
    output: str | None,
) -> None:
    """Inline the resources referenced by INPUTS.

    INPUTS are stylesheet files or directories, or one comma-separated list.
    """
    unity = _build_unity(inputs, recursive=recursive)
    text = unity.parse(OutputType(output_type), separate=separate, mhtml_uri=mhtml_uri)
    _write(text, output)


@cli.command()
@click.argument("inputs", nargs=-1)
@click.option(
    "--out-dir",
    required=True,
    type=click.Path(file_okay=False),
    help="Directory receiving the three stylesheets",
)
@click.option("--name", default="styles", show_default=True, help="Base file name")
@click.option("--mhtml-uri", default=None, help="Absolute URI of the MHTML stylesheet")
def split(
    inputs: tuple[str, ...], out_dir: str, name: str, mhtml_uri: str | None
) -> None:
    """Write plain, data URI and MHTML stylesheets as separate files."""
    unity = _build_unity(inputs)
    outputs = unity.parse_separate(mhtml_uri=mhtml_uri)

    target = Path(out_dir)
    target.mkdir(parents=True, exist_ok=True)
    for output_type, text in outputs.items():
        path = target / f"{name}.{output_type.value}.css"
        path.write_text(text + "\n", encoding="utf-8")
        click.echo(f"  {path}")
    click.echo(f"Wrote 3 stylesheets to {target}")


@cli.command()
@click.argument("inputs", nargs=-1)
@click.option("-o", "--output", default=None, help="Write to FILE instead of stdout")
def combine(inputs: tuple[str, ...], output: str | None) -> None:
    """Concatenate INPUTS with file marker comments."""
    unity = _build_unity(inputs)
    _write(unity.combine_stylesheets().strip(), output)


@cli.command()
@click.argument("inputs", nargs=-1)
@click.option("-o", "--output", default=None, help="Write to FILE instead of stdout")
def normalize(inputs: tuple[str, ...], output: str | None) -> None:
    """Combine INPUTS and reformat them one declaration per line."""
    unity = _build_unity(inputs)
    _write(unity.normalize().strip(), output)


@cli.command()
@click.argument("inputs", nargs=-1)
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--mhtml-uri", default=None, help="Fixed MHTML base URI")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(
    inputs: tuple[str, ...], host: str, port: int, mhtml_uri: str | None, debug: bool
) -> None:
    """Serve the inlined stylesheets over HTTP."""
    from css_unity.web.app import create_app

    # Fail fast on bad input instead of on the first request.
    _build_unity(inputs)

    config = CSSUnityConfig(mhtml_uri=mhtml_uri, host=host, port=port)
    app = create_app(stylesheets=_input_arg(inputs), config=config)
    click.echo(f"Starting CSS Unity on {host}:{port}")
    app.run(host=config.host, port=config.port, debug=debug)
