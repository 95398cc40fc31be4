from __future__ import annotations

import pytest

from css_unity.web.app import create_app


@pytest.fixture
def site_css(asset_dir):
    path = asset_dir / "site.css"
    path.write_text(".logo{background:url(logo.png)}\n.plain{color:red}\n")
    return path


@pytest.fixture
def app(site_css):
    """Create a Flask app serving site.css."""
    application = create_app(stylesheets=[str(site_css)])
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
