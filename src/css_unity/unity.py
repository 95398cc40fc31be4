"""CSSUnity: combine, normalize and inline one set of stylesheets."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from css_unity.config import CSSUnityConfig
from css_unity.engine import transform
from css_unity.formatter import DEFAULT_OPTIONS, CssutilsFormatter, Formatter
from css_unity.inputs import collect_stylesheets
from css_unity.model import OutputType, SeparateOutput
from css_unity.resolver import ResourceResolver

__all__ = ["CSSUnity"]

logger = logging.getLogger(__name__)


class CSSUnity:
    """Pipeline over one ordered set of stylesheets.

    The instance owns a single working text buffer.  Each stage fills it
    from the previous stage when it is still empty, so ``parse`` alone
    runs the whole pipeline:

        combine_stylesheets -> normalize -> parse

    Instances are not meant to be shared between requests.
    """

    def __init__(
        self,
        input: Sequence[str | Path] | str,
        recursive: bool = False,
        *,
        formatter: Formatter | None = None,
        config: CSSUnityConfig | None = None,
    ) -> None:
        self.config = config or CSSUnityConfig(recursive=recursive)
        self.stylesheets = collect_stylesheets(
            input, recursive=recursive or self.config.recursive
        )
        self.formatter = formatter or CssutilsFormatter(self.config.encoding)
        self.resolver = ResourceResolver.for_stylesheets(self.stylesheets)
        self.text = ""
        logger.info("Loaded %d stylesheet(s)", len(self.stylesheets))

    def combine_stylesheets(self) -> str:
        """Concatenate the stylesheets into the working text.

        Each file is preceded by a ``/* FILE: <path> */`` marker; files
        removed since construction are skipped.
        """
        for stylesheet in self.stylesheets:
            if self.text:
                self.text += "\n\n"
            if stylesheet.is_file():
                self.text += f"/* FILE: {stylesheet} */"
                self.text += stylesheet.read_text(encoding=self.config.encoding).strip()
        return self.text

    def normalize(self) -> str:
        """Return the combined text reformatted one declaration per line."""
        if not self.text:
            self.text = self.combine_stylesheets()
        if not self.text:
            return self.text
        return self.formatter.format(self.text, DEFAULT_OPTIONS)

    def parse(
        self,
        type: OutputType | str | bool | None = None,
        separate: bool = False,
        mhtml_uri: str | None = None,
    ) -> str:
        """Inline the stylesheets' resources.

        *type* selects the output: ``None``/``False`` for data URIs and
        MHTML together, ``"datauri"``, ``"mhtml"``, or ``"nores"`` to strip
        resource references.  With *separate*, lines without resources are
        only kept in the ``"nores"`` output.
        """
        output = OutputType.coerce(type)
        if not self.text:
            self.text = self.normalize()
        if not self.text:
            return self.text

        if mhtml_uri is None:
            mhtml_uri = self.config.mhtml_uri
        logger.info("Parsing stylesheets: type=%s separate=%s", output, separate)
        return transform(
            self.text,
            self.resolver,
            output=output,
            separate=separate,
            mhtml_uri=mhtml_uri,
        )

    def parse_separate(self, mhtml_uri: str | None = None) -> SeparateOutput:
        """Return the plain, data URI and MHTML stylesheets side by side."""
        return SeparateOutput(
            nores=self.parse(OutputType.NORES, separate=True, mhtml_uri=mhtml_uri),
            datauri=self.parse(OutputType.DATAURI, separate=True, mhtml_uri=mhtml_uri),
            mhtml=self.parse(OutputType.MHTML, separate=True, mhtml_uri=mhtml_uri),
        )
