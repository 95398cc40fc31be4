from __future__ import annotations

import pytest

from css_unity.resolver import ResourceResolver

# base64: "AQIDBA=="
LOGO_BYTES = bytes([1, 2, 3, 4])


@pytest.fixture
def asset_dir(tmp_path):
    """Directory holding a tiny logo.png next to where stylesheets live."""
    (tmp_path / "logo.png").write_bytes(LOGO_BYTES)
    return tmp_path


@pytest.fixture
def resolver(asset_dir):
    return ResourceResolver(asset_dir)


class IdentityFormatter:
    """Formatter that leaves the combined text untouched."""

    def __init__(self) -> None:
        self.calls = 0

    def format(self, text, options=None):
        self.calls += 1
        return text


@pytest.fixture
def identity_formatter():
    return IdentityFormatter()
