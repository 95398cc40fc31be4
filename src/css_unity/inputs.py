from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from css_unity.errors import InvalidInputTypeError, MissingInputError

logger = logging.getLogger(__name__)


def split_input(input: Sequence[str | Path] | str) -> list[str]:
    """Turn the constructor argument into a list of raw path strings."""
    if not input:
        raise MissingInputError()
    if isinstance(input, str):
        return input.split(",")
    if isinstance(input, (list, tuple)):
        return [str(item) for item in input]
    raise InvalidInputTypeError()


def _expand(path: Path, recursive: bool) -> list[Path]:
    if path.is_file():
        return [path]
    if not path.is_dir():
        logger.debug("Skipping missing stylesheet path: %s", path)
        return []

    files: list[Path] = []
    for child in sorted(path.iterdir()):
        if child.is_file():
            files.append(child)
        # TODO: recurse into subdirectories once relative url() paths are
        # rebased onto each stylesheet's own directory.
    if recursive:
        logger.warning("Recursive directory traversal is not supported: %s", path)
    return files


def collect_stylesheets(
    input: Sequence[str | Path] | str, recursive: bool = False
) -> tuple[Path, ...]:
    """Resolve *input* into the ordered set of stylesheet files.

    Files are added directly; directories contribute their immediate files.
    Raises :class:`MissingInputError` for empty input and
    :class:`InvalidInputTypeError` for anything but a list or a string.
    """
    stylesheets: list[Path] = []
    for raw in split_input(input):
        if not raw.strip():
            continue
        path = Path(raw.strip()).expanduser().resolve()
        stylesheets.extend(_expand(path, recursive))
    return tuple(stylesheets)
