"""
uricraft - Chainable URI/path values for assembling links.

Core exports:
- Uri: Mutable URI/path value (prefix checks, prepend/append, basename removal)
- join_uri: Join fragments with single slashes
- UriConfig / UriConfigLoader: Layered link settings
- install_uri_helpers: Jinja2 filters and globals
- Fault types: UriFault, UriOperandFault, ConfigInvalidFault
"""

__version__ = "0.1.0"

from .uri import Uri, join_uri
from .config import UriConfig, UriConfigLoader
from .templates import UriHelpers, install_uri_helpers
from .faults import (
    Fault,
    FaultDomain,
    Severity,
    UriFault,
    UriOperandFault,
    ConfigFault,
    ConfigInvalidFault,
)

__all__ = [
    "__version__",
    # Core
    "Uri",
    "join_uri",
    # Config
    "UriConfig",
    "UriConfigLoader",
    # Templates
    "UriHelpers",
    "install_uri_helpers",
    # Faults
    "Fault",
    "FaultDomain",
    "Severity",
    "UriFault",
    "UriOperandFault",
    "ConfigFault",
    "ConfigInvalidFault",
]
