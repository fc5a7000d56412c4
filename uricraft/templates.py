"""
Template integration - Jinja2 filters, tests and globals for building links.

Usage:
    env = jinja2.Environment()
    install_uri_helpers(env, UriConfig(base_url="https://dbwebb.se"))

    {{ "https://dbwebb.se/" | uri_append("/about") }}
    {{ url_for_path("docs/index.html") }}
    {% if link is uri_startswith("http://", "https://") %}...{% endif %}
"""

import logging
from typing import Any, Optional

from jinja2 import Environment

from .config import UriConfig
from .uri import Uri

logger = logging.getLogger("uricraft.templates")


def uri_append(base: Any, path: Any) -> str:
    """Filter: join ``path`` after ``base``."""
    return Uri(base).append(Uri(path)).uri()


def uri_prepend(path: Any, base: Any) -> str:
    """Filter: join ``base`` in front of ``path``."""
    return Uri(path).prepend(Uri(base)).uri()


def uri_startswith(value: Any, *prefixes: str) -> bool:
    """Test: ``value`` starts with any of ``prefixes``."""
    return Uri(value).starts_with(*prefixes)


class UriHelpers:
    """
    Config-bound helpers exposed to templates.

    Args:
        config: Link settings (default: UriConfig())
    """

    def __init__(self, config: Optional[UriConfig] = None):
        self.config = config or UriConfig()

    def strip_basename(self, url: Any, basename: Optional[str] = None) -> str:
        """Filter: drop ``basename`` (default: the configured index) from ``url``."""
        if basename is None:
            basename = self.config.index_basename
        return Uri(url).remove_basename(basename).uri()

    def url_for_path(self, path: Any) -> str:
        """
        Build a link for ``path`` under the configured base URL.

        Paths that already carry a scheme are returned rendered but not
        joined.
        """
        uri = Uri(path)
        if not uri.starts_with("http://", "https://", "//"):
            uri.prepend(Uri(self.config.base_url))
        if self.config.strip_index:
            uri.remove_basename(self.config.index_basename)
        return uri.uri()


def install_uri_helpers(env: Environment, config: Optional[UriConfig] = None) -> UriHelpers:
    """
    Register URI filters, tests and globals on a Jinja2 environment.

    Args:
        env: Jinja2 environment to extend
        config: Link settings

    Returns:
        The UriHelpers instance bound to the environment
    """
    helpers = UriHelpers(config)

    env.filters["uri_append"] = uri_append
    env.filters["uri_prepend"] = uri_prepend
    env.filters["strip_basename"] = helpers.strip_basename
    env.tests["uri_startswith"] = uri_startswith
    env.globals["url_for_path"] = helpers.url_for_path

    logger.debug("Installed URI helpers (base_url=%r)", helpers.config.base_url)
    return helpers
