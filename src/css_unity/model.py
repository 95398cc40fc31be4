"""Value types shared by the tracker, engine and composer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum


class OutputType(StrEnum):
    """Which inlined forms a parse writes.

    ``UNIFIED`` writes data URIs and MHTML together, ``NORES`` strips every
    resource reference.
    """

    UNIFIED = "unified"
    DATAURI = "datauri"
    MHTML = "mhtml"
    NORES = "nores"

    @classmethod
    def coerce(cls, value: OutputType | str | bool | None) -> OutputType:
        """Map the loose ``type`` argument of ``parse`` onto a member."""
        if value is None or value is False:
            return cls.UNIFIED
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown output type: {value!r}")

    @property
    def writes_data_uri(self) -> bool:
        return self in (OutputType.UNIFIED, OutputType.DATAURI)

    @property
    def writes_mhtml(self) -> bool:
        return self in (OutputType.UNIFIED, OutputType.MHTML)


class LineKind(Enum):
    BLANK = "blank"
    BLOCK_OPEN = "block_open"
    BLOCK_CLOSE = "block_close"
    IN_BLOCK = "in_block"


@dataclass(frozen=True)
class BlockContext:
    """Lookbehind state carried from one line to the next.

    ``at_block`` and ``selector`` hold the header line of the block most
    recently opened; at most one of them is non-empty.
    """

    at_block: str = ""
    selector: str = ""
    font_face_family: str = ""

    @property
    def inside_font_face(self) -> bool:
        return self.at_block.startswith("@font-face")


@dataclass(frozen=True)
class ResourceMatch:
    """A ``url(...)`` reference found on a line."""

    filepath: str  # exact substring replaced in the line
    filename_no_ext: str
    extension: str

    @property
    def mime_type(self) -> str:
        return f"image/{self.extension}"


@dataclass(frozen=True)
class SeparateOutput:
    """The three parallel stylesheets produced by a separate parse."""

    nores: str
    datauri: str
    mhtml: str

    def items(self) -> tuple[tuple[OutputType, str], ...]:
        return (
            (OutputType.NORES, self.nores),
            (OutputType.DATAURI, self.datauri),
            (OutputType.MHTML, self.mhtml),
        )
