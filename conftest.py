"""Shared fixtures: an app pointed at a temporary static directory."""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from hello_web.app import create_app

STATIC_BODY = "raw static contents\n"


@pytest.fixture
def public_dir(tmp_path):
    d = tmp_path / "public"
    (d / "docs").mkdir(parents=True)
    (d / "hello.txt").write_text(STATIC_BODY)
    (d / "docs" / "notes.txt").write_text("nested file\n")
    return d


@pytest.fixture
def app(public_dir):
    application = create_app(public_dir=public_dir)
    application.config.update(TESTING=True)
    return application


@pytest.fixture
def client(app):
    return app.test_client()
