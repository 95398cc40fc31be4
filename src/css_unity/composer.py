"""Output composer: block buffering, empty-block elision and MHTML assembly."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["OutputComposer", "MHTML_HEADER", "MHTML_FOOTER"]

MHTML_BOUNDARY = "|"
MHTML_HEADER = f'/*\nContent-Type: multipart/related; boundary="{MHTML_BOUNDARY}"\n'
MHTML_FOOTER = f"\n--{MHTML_BOUNDARY}--\n*/\n"


@dataclass
class _Block:
    header: str
    lines: list[str] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.lines


class OutputComposer:
    """Accumulate rewritten lines into the final stylesheet text.

    Every opened block gets its own buffer.  Closing a block flushes
    ``header``, its content and ``}`` into the enclosing buffer, unless
    nothing was written inside it, in which case the block is dropped.
    """

    def __init__(self, with_mhtml: bool = False) -> None:
        self.with_mhtml = with_mhtml
        self._root: list[str] = []
        self._stack: list[_Block] = []
        self._mhtml_parts: list[str] = []

    @property
    def _current(self) -> list[str]:
        return self._stack[-1].lines if self._stack else self._root

    @property
    def depth(self) -> int:
        return len(self._stack)

    def append(self, line: str) -> None:
        self._current.append(f"{line}\n")

    def extend(self, lines: list[str]) -> None:
        for line in lines:
            self.append(line)

    def open_block(self, header: str) -> None:
        self._stack.append(_Block(header))

    def close_block(self, line: str = "}") -> bool:
        """Close the innermost block; return ``False`` if it was dropped."""
        if not self._stack:
            # Unbalanced brace, keep it.
            self.append(line)
            return True
        block = self._stack.pop()
        if block.empty:
            return False
        self._current.append(f"{block.header}\n")
        self._current.extend(block.lines)
        self.append(line)
        return True

    def add_mhtml_part(self, location: str, encoded: str) -> None:
        self._mhtml_parts.append(
            f"\n--{MHTML_BOUNDARY}\n"
            f"Content-Location:{location}\n"
            "Content-Transfer-Encoding:base64\n\n"
            f"{encoded}\n"
        )

    @property
    def parsed_text(self) -> str:
        """CSS written so far, with still-open blocks flushed verbatim."""
        out = list(self._root)
        for block in self._stack:
            out.append(f"{block.header}\n")
            out.extend(block.lines)
        return "".join(out)

    @property
    def mhtml_body(self) -> str:
        return "".join(self._mhtml_parts)

    def render(self) -> str:
        text = self.parsed_text
        if self.with_mhtml:
            text = MHTML_HEADER + self.mhtml_body + MHTML_FOOTER + text
        return text.strip()
