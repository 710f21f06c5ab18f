"""
Shared test fixtures and configuration for entire test suite.

Provides: env file factories, process environment isolation
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import os

import pytest


ENV_FILE_CONTENT = """\
# Local overrides for the App Runner stack
RDS_MULTI_AZ=true
APPRUNNER_SERVICE_NAME=from-file
"""


@pytest.fixture
def env_file(tmp_path):
    """
    Write a .env file with a comment line and two settings.

    Returns:
        Path: Location of the env file
    """
    path = tmp_path / ".env"
    path.write_text(ENV_FILE_CONTENT, encoding="utf-8")
    return path


@pytest.fixture
def isolated_environ(monkeypatch):
    """
    Replace os.environ with a copy so env file loading cannot leak between tests.

    Returns:
        dict: The copy now installed as os.environ
    """
    environ = dict(os.environ)
    for key in ("RDS_MULTI_AZ", "APPRUNNER_SERVICE_NAME", "REGION"):
        environ.pop(key, None)
    monkeypatch.setattr(os, "environ", environ)
    return environ
