"""Shared test fixtures for rfml tests."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_rfml() -> str:
    """Return a sample RFML test with metadata, steps and an embedded test."""
    return """#!login-works
# title: Login works
# start_uri: /login
# site_id: 42
# tags: smoke, auth
# browsers: chrome, firefox
# Checks that a registered user can log in.
# Note: uses the shared staging account

Enter valid credentials and press "Log in"
Are you on the dashboard?

Attach the invoice {{ file.download(./fixtures/invoice.pdf) }}
Did the upload succeed?

# redirect: false
- shared_logout
"""


@pytest.fixture
def in_tmp_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Change cwd to a temporary directory for the duration of the test."""
    original_cwd = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture
def rfml_file(in_tmp_dir: Path, sample_rfml: str) -> Path:
    """Write the sample RFML test into the temporary cwd."""
    path = in_tmp_dir / "login.rfml"
    path.write_text(sample_rfml)
    return path
