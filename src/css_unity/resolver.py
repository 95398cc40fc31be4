"""Resource resolver: loads ``url(...)`` targets as base64 text."""

from __future__ import annotations

import logging
from pathlib import Path

from css_unity.errors import ResourceNotFoundError
from css_unity.uris import encode_to_base64

logger = logging.getLogger(__name__)


class ResourceResolver:
    """Resolve resource paths against a single base directory.

    The base directory is that of the first stylesheet in the set, even for
    references that came from a later stylesheet living elsewhere.
    """

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)
        self._cache: dict[str, str | None] = {}

    @classmethod
    def for_stylesheets(cls, stylesheets: tuple[Path, ...]) -> ResourceResolver:
        if not stylesheets:
            return cls(Path.cwd())
        return cls(stylesheets[0].parent)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def read(self, filepath: str) -> bytes:
        """Return the raw bytes of *filepath*.

        Raises :class:`ResourceNotFoundError` when nothing exists there.
        """
        # Root-relative references stay inside the base directory.
        path = self._base_dir / filepath.lstrip("/")
        if not path.is_file():
            raise ResourceNotFoundError(path)
        return path.read_bytes()

    def resolve(self, filepath: str) -> str | None:
        """Return the base64 text of *filepath*, or ``None`` if unavailable."""
        if filepath in self._cache:
            return self._cache[filepath]
        try:
            encoded = encode_to_base64(self.read(filepath)) or None
        except ResourceNotFoundError as exc:
            logger.debug("Leaving reference unresolved: %s", exc)
            encoded = None
        self._cache[filepath] = encoded
        return encoded
