"""Line transform engine: rewrites ``url(...)`` references line by line.

The engine never builds a CSS tree.  It relies on the text having been
normalized to one declaration per line, then:

    1. strips comments and puts every comma-joined ``url(`` on its own line
    2. feeds each line through :class:`BlockTracker`
    3. rewrites in-block lines into zero, one or two output lines
"""

from __future__ import annotations

import logging
import re

from css_unity.composer import OutputComposer
from css_unity.model import LineKind, OutputType, ResourceMatch
from css_unity.resolver import ResourceResolver
from css_unity.tracker import BlockTracker
from css_unity.uris import content_location, data_uri, mhtml_uri

__all__ = ["LineTransformer", "find_resource", "prepare_text", "transform"]

logger = logging.getLogger(__name__)

_URL_RE = re.compile(
    r"""
    url\(['"]?
    (?P<filepath>
        (?P<filenoext>.+)?          # greedy: the last dot starts the extension
        \.
        (?P<extension>[^'")?#]+)    # stops at quote, paren, query or fragment
        .*?
    )
    ['"]?\)
    """,
    re.IGNORECASE | re.VERBOSE,
)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

_MULTIPLE_URL_RE = re.compile(r",\s*(url)", re.IGNORECASE)

_LINE_SPLIT_RE = re.compile(r"\r?\n")

_HACK_PREFIXES = ("_", "*")


def prepare_text(text: str) -> str:
    """Strip comments and split comma-joined ``url(`` lists onto own lines."""
    text = _COMMENT_RE.sub("", text)
    return _MULTIPLE_URL_RE.sub(r",\n\1", text)


def find_resource(line: str) -> ResourceMatch | None:
    """Return the first ``url(...)`` reference on *line*, if any."""
    match = _URL_RE.search(line)
    if match is None:
        return None
    return ResourceMatch(
        filepath=match.group("filepath"),
        filename_no_ext=match.group("filenoext") or "",
        extension=match.group("extension"),
    )


def _is_hack(line: str, resource: ResourceMatch) -> bool:
    return line.startswith(_HACK_PREFIXES) or resource.filepath.startswith(
        _HACK_PREFIXES
    )


class LineTransformer:
    """Rewrite a single in-block line according to the requested output."""

    def __init__(
        self,
        resolver: ResourceResolver,
        output: OutputType = OutputType.UNIFIED,
        separate: bool = False,
        mhtml_base_uri: str | None = None,
    ) -> None:
        self.resolver = resolver
        self.output = output
        self.separate = separate
        self.mhtml_base_uri = mhtml_base_uri

    def transform(
        self, line: str, composer: OutputComposer | None = None
    ) -> list[str]:
        """Return the lines that replace *line* in the output.

        MHTML parts for resolved resources are added to *composer*.
        """
        resource = find_resource(line)
        if resource is None:
            if self.separate and self.output is not OutputType.NORES:
                return []
            return [line]

        if _is_hack(line, resource):
            return [line]

        if self.output is OutputType.NORES:
            logger.debug("Stripping resource %s", resource.filepath)
            return []

        encoded = self.resolver.resolve(resource.filepath)
        lines: list[str] = []

        if self.output.writes_data_uri:
            uri = data_uri(resource.filepath, resource.mime_type, encoded)
            lines.append(line.replace(resource.filepath, uri))

        if self.output.writes_mhtml and encoded:
            location = content_location(resource.filepath)
            uri = mhtml_uri(self.mhtml_base_uri, location)
            lines.append("*" + line.replace(resource.filepath, uri))
            if composer is not None:
                composer.add_mhtml_part(location, encoded)

        return lines


def transform(
    text: str,
    resolver: ResourceResolver,
    output: OutputType | str | bool | None = None,
    separate: bool = False,
    mhtml_uri: str | None = None,
) -> str:
    """Run the single forward pass over normalized *text*.

    Returns the rewritten stylesheet, prefixed with the MHTML document when
    the output type includes MHTML.
    """
    output = OutputType.coerce(output)
    tracker = BlockTracker()
    transformer = LineTransformer(
        resolver, output=output, separate=separate, mhtml_base_uri=mhtml_uri
    )
    composer = OutputComposer(with_mhtml=output.writes_mhtml)

    for line in _LINE_SPLIT_RE.split(prepare_text(text)):
        kind = tracker.feed(line)
        if kind is LineKind.BLANK:
            continue
        if kind is LineKind.BLOCK_OPEN:
            composer.open_block(line)
        elif kind is LineKind.BLOCK_CLOSE:
            composer.close_block(line)
        elif tracker.context.inside_font_face:
            # TODO: inline font files referenced from @font-face src lines
            composer.append(line)
        else:
            composer.extend(transformer.transform(line, composer))

    return composer.render()
