"""``data:`` and ``mhtml:`` URI helpers."""
from __future__ import annotations

import base64


def encode_to_base64(data: bytes) -> str:
    """Base64-encode raw bytes and return as a string."""
    return base64.b64encode(data).decode("ascii")


def data_uri(filepath: str, mime_type: str, encoded: str | None) -> str:
    """Build a ``data:`` URI from already-encoded bytes.

    Returns *filepath* unchanged when *encoded* is missing or empty, so an
    unresolved reference stays a plain relative path.
    """
    if not encoded:
        return filepath
    return f"data:{mime_type};base64,{encoded}"


def content_location(filepath: str) -> str:
    """Flatten *filepath* into an MHTML ``Content-Location`` value."""
    return filepath.replace("/", "_")


def mhtml_uri(base_uri: str | None, location: str) -> str:
    """Build an ``mhtml:`` reference to the part stored at *location*."""
    return f"mhtml:{base_uri or ''}!{location}"


def absolute_request_uri(
    scheme: str, host: str, port: int | str | None, path: str
) -> str:
    """Assemble the absolute URI of the request serving the stylesheet.

    The port is omitted when it is 80, matching how the stylesheet URL is
    usually written by browsers.
    """
    scheme = "https" if scheme == "https" else "http"
    port_part = f":{port}" if port and str(port) != "80" else ""
    return f"{scheme}://{host}{port_part}{path}"
