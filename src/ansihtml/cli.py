"""ansi2html CLI: click command group for converting terminal logs to HTML."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Callable

import click

from ansihtml import __version__
from ansihtml.config import ConfigError, ConverterConfig, read_config
from ansihtml.converter import AnsiToHtml
from ansihtml.renderers import stylesheet, wrap_document

logging.basicConfig(level=logging.WARNING)


class Ansi2HtmlError(click.ClickException):
    """General conversion error (exit code 1)."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)


class FetchFailedError(click.ClickException):
    """Remote log could not be downloaded (exit code 2)."""

    exit_code = 2

    def __init__(self, message: str) -> None:
        super().__init__(message)


def _build_config(
    config_path: Path | None,
    use_classes: bool,
    no_escape: bool,
    schemes: tuple[str, ...],
) -> ConverterConfig:
    """Load the config file (if any) and apply command-line overrides."""
    if config_path is not None:
        try:
            config = read_config(config_path)
        except ConfigError as e:
            raise Ansi2HtmlError(str(e))
    else:
        config = ConverterConfig()
    if use_classes:
        config.use_classes = True
    if no_escape:
        config.escape_html = False
    if schemes:
        config.url_allowlist = {scheme: True for scheme in schemes}
    return config


def _convert_streams(
    conv: AnsiToHtml, streams: list[IO[str]], chunk_size: int
) -> str:
    parts: list[str] = []
    for stream in streams:
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            parts.append(conv.convert(chunk))
    parts.append(conv.flush())
    return "".join(parts)


def _emit(
    body: str,
    config: ConverterConfig,
    full: bool,
    title: str,
    output: Path | None,
) -> None:
    if full:
        css = stylesheet(config) if config.use_classes else ""
        body = wrap_document(body, title=title, css=css)
    if output is not None:
        output.write_text(body, encoding="utf-8")
    else:
        click.echo(body, nl=False)


def _conversion_options(func: Callable[..., None]) -> Callable[..., None]:
    """Options shared by ``convert`` and ``fetch``."""
    options = [
        click.option("--classes", "use_classes", is_flag=True, default=False,
                     help="Emit CSS classes for named colors instead of inline styles."),
        click.option("--no-escape", is_flag=True, default=False,
                     help="Do not HTML-escape the text."),
        click.option("--allow-scheme", "schemes", multiple=True,
                     help="URL scheme allowed in hyperlinks (repeatable, replaces the defaults)."),
        click.option("--full", is_flag=True, default=False,
                     help="Wrap the output in a complete HTML document."),
        click.option("--title", default="", help="Document title (with --full)."),
        click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
                     default=None, help="JSON config file."),
        click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path),
                     default=None, help="Write HTML here instead of stdout."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="ansi2html")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """ansi2html: convert ANSI-colored terminal output to HTML."""
    if verbose:
        logging.getLogger("ansihtml").setLevel(logging.DEBUG)


@cli.command()
@click.argument("files", nargs=-1, type=click.File("r", encoding="utf-8", errors="replace"))
@click.option("--chunk-size", default=4096, type=click.IntRange(min=1),
              help="Characters read per conversion call.")
@_conversion_options
def convert(
    files: tuple[IO[str], ...],
    chunk_size: int,
    use_classes: bool,
    no_escape: bool,
    schemes: tuple[str, ...],
    full: bool,
    title: str,
    config_path: Path | None,
    output: Path | None,
) -> None:
    """Convert FILES (or stdin) to HTML."""
    config = _build_config(config_path, use_classes, no_escape, schemes)
    streams = list(files) or [click.open_file("-", "r", encoding="utf-8", errors="replace")]
    conv = AnsiToHtml(config)
    body = _convert_streams(conv, streams, chunk_size)
    _emit(body, config, full, title, output)


@cli.command()
@click.argument("url")
@click.option("--timeout", default=30.0, type=float, help="Request timeout in seconds.")
@_conversion_options
def fetch(
    url: str,
    timeout: float,
    use_classes: bool,
    no_escape: bool,
    schemes: tuple[str, ...],
    full: bool,
    title: str,
    config_path: Path | None,
    output: Path | None,
) -> None:
    """Download a raw log from URL and convert it to HTML."""
    from ansihtml.fetch import FetchError, LogFetcher

    config = _build_config(config_path, use_classes, no_escape, schemes)
    try:
        text = LogFetcher(timeout=timeout).fetch(url)
    except FetchError as e:
        raise FetchFailedError(str(e))

    conv = AnsiToHtml(config)
    body = conv.convert(text) + conv.flush()
    _emit(body, config, full, title or url, output)


@cli.command()
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="JSON config file.")
def css(config_path: Path | None) -> None:
    """Print the stylesheet used with --classes."""
    config = _build_config(config_path, False, False, ())
    click.echo(stylesheet(config), nl=False)

