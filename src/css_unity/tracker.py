"""Block context tracker: classifies normalized CSS lines one at a time."""

from __future__ import annotations

from dataclasses import replace

from css_unity.model import BlockContext, LineKind

__all__ = ["BlockTracker", "classify_line"]


def classify_line(line: str) -> LineKind:
    """Classify a single line without touching any state."""
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    if line == "}":
        return LineKind.BLOCK_CLOSE
    if stripped.endswith("{"):
        return LineKind.BLOCK_OPEN
    return LineKind.IN_BLOCK


class BlockTracker:
    """Finite-state tracker over the lines of one stylesheet.

    Each call to :meth:`feed` classifies the line and replaces
    :attr:`context` with the state that holds after it:

        BLOCK_OPEN   "@..." sets at_block, anything else sets selector
        BLOCK_CLOSE  clears selector if set, otherwise at_block and family
        IN_BLOCK     inside @font-face, "font-family" lines set the family
    """

    def __init__(self) -> None:
        self.context = BlockContext()

    def feed(self, line: str) -> LineKind:
        kind = classify_line(line)
        ctx = self.context

        if kind is LineKind.BLOCK_OPEN:
            if line.startswith("@"):
                self.context = BlockContext(at_block=line)
            else:
                self.context = BlockContext(selector=line)
        elif kind is LineKind.BLOCK_CLOSE:
            if ctx.selector:
                self.context = replace(ctx, selector="")
            else:
                self.context = BlockContext()
        elif kind is LineKind.IN_BLOCK:
            if ctx.inside_font_face and line.startswith("font-family"):
                self.context = replace(ctx, font_face_family=line)

        return kind
