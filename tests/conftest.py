"""
Shared test fixtures for the uricraft test suite.
"""

import os

import pytest
from jinja2 import Environment

from uricraft.config import UriConfig
from uricraft.templates import install_uri_helpers


@pytest.fixture
def uri_config():
    """Link settings for a site served from https://dbwebb.se."""
    return UriConfig(base_url="https://dbwebb.se/", index_basename="index.html", strip_index=True)


@pytest.fixture
def jinja_env(uri_config):
    """Jinja2 environment with the URI helpers installed."""
    env = Environment()
    install_uri_helpers(env, uri_config)
    return env


@pytest.fixture
def clean_env(monkeypatch):
    """Remove URI_* variables so the process environment cannot leak into config tests."""
    for key in list(os.environ):
        if key.startswith("URI_"):
            monkeypatch.delenv(key)
    return monkeypatch
