"""Error hierarchy for CSS Unity."""
from __future__ import annotations

from pathlib import Path


class CSSUnityError(Exception):
    """Base error for all css_unity errors.

    ``exit_code`` is the process status the command line uses when the
    error is fatal.
    """

    exit_code: int = 1

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Construction errors (fatal)
# ---------------------------------------------------------------------------


class MissingInputError(CSSUnityError):
    """No stylesheet paths were given."""

    exit_code = 1

    def __init__(self, message: str = "Input is required.", **kwargs) -> None:
        super().__init__(message, **kwargs)


class InvalidInputTypeError(CSSUnityError):
    """Input was neither a sequence of paths nor a comma-separated string."""

    exit_code = 2

    def __init__(
        self,
        message: str = (
            "Input must be a string array or comma-separated string of paths."
        ),
        **kwargs,
    ) -> None:
        super().__init__(message, **kwargs)


# ---------------------------------------------------------------------------
# Resource errors (absorbed by the resolver)
# ---------------------------------------------------------------------------


class ResourceNotFoundError(CSSUnityError):
    """A ``url(...)`` reference points at a file that does not exist."""

    def __init__(self, path: str | Path, **kwargs) -> None:
        super().__init__(f"Resource not found: {path}", **kwargs)
        self.path = Path(path)
