"""CSS normalization through cssutils.

The transform engine expects one declaration per line, block headers ending
in ``{`` and closing braces alone on their line.  cssutils' serializer is
configured to produce exactly that layout.
"""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from typing import Protocol

import cssutils
from cssutils.serialize import CSSSerializer

__all__ = ["FormatOptions", "Formatter", "CssutilsFormatter", "DEFAULT_OPTIONS"]

logger = logging.getLogger(__name__)

# cssutils drops legacy "*prop" hacks, so hack property names travel through
# the round trip under a vendor-style alias.
_HACK_DECLARATION_RE = re.compile(r"(?<=[{;])(\s*)([*_])([-\w]+)(\s*:)")
_HACK_ALIAS_RE = re.compile(r"-cssunity-hack-(star|underscore)-", re.IGNORECASE)
_HACK_ALIASES = {"*": "star", "_": "underscore"}
_HACK_PREFIXES = {"star": "*", "underscore": "_"}

# Rules serialize through the module-global cssutils.ser, so swapping it in
# must not interleave between threads.
_SERIALIZER_LOCK = threading.Lock()


def _mask_hacks(text: str) -> str:
    def alias(m: re.Match[str]) -> str:
        space, prefix, name, colon = m.groups()
        return f"{space}-cssunity-hack-{_HACK_ALIASES[prefix]}-{name}{colon}"

    return _HACK_DECLARATION_RE.sub(alias, text)


def _unmask_hacks(text: str) -> str:
    return _HACK_ALIAS_RE.sub(lambda m: _HACK_PREFIXES[m.group(1).lower()], text)


@dataclass(frozen=True)
class FormatOptions:
    preserve_structure: bool = True
    always_emit_trailing_semicolon: bool = True
    compress_font_weight: bool = False


DEFAULT_OPTIONS = FormatOptions()


class Formatter(Protocol):
    """Turns raw concatenated CSS into canonical line-per-declaration CSS."""

    def format(self, text: str, options: FormatOptions = DEFAULT_OPTIONS) -> str: ...


class CssutilsFormatter:
    """Formatter backed by a private cssutils serializer."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def _serializer(self, options: FormatOptions) -> CSSSerializer:
        serializer = CSSSerializer()
        prefs = serializer.prefs
        prefs.indent = ""
        prefs.indentClosingBrace = False
        prefs.lineSeparator = "\n"
        prefs.omitLastSemicolon = not options.always_emit_trailing_semicolon
        prefs.keepAllProperties = options.preserve_structure
        prefs.keepComments = options.preserve_structure
        prefs.keepEmptyRules = options.preserve_structure
        prefs.keepUnknownAtRules = options.preserve_structure
        prefs.minimizeColorHash = not options.preserve_structure
        prefs.omitLeadingZero = not options.preserve_structure
        # cssutils never rewrites font-weight keywords, so
        # compress_font_weight has nothing to switch off.
        return serializer

    def format(self, text: str, options: FormatOptions = DEFAULT_OPTIONS) -> str:
        if not text.strip():
            return ""

        cssutils.log.setLevel(logging.FATAL)
        sheet = cssutils.parseString(_mask_hacks(text), validate=False)
        serializer = self._serializer(options)

        with _SERIALIZER_LOCK:
            previous = cssutils.ser
            cssutils.setSerializer(serializer)
            try:
                css = sheet.cssText
            finally:
                cssutils.setSerializer(previous)

        if isinstance(css, bytes):
            css = css.decode(self.encoding)
        css = _unmask_hacks(css)
        logger.debug("Normalized %d characters into %d", len(text), len(css))
        return css
