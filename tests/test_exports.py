"""
Test 5: Package Exports (uricraft/__init__.py)

Tests that the public API is importable from the top-level package.
"""

import re
from pathlib import Path

import uricraft

ROOT = Path(__file__).resolve().parent.parent


class TestTopLevelExports:

    def test_all_resolves(self):
        for name in uricraft.__all__:
            assert hasattr(uricraft, name), name

    def test_core(self):
        from uricraft import Uri, join_uri
        assert join_uri(Uri("a"), "b") == "a/b"

    def test_version_matches_setup(self):
        text = (ROOT / "setup.py").read_text()
        m = re.search(r'version\s*=\s*"([^"]+)"', text)
        assert m, "Could not find version in setup.py"
        assert uricraft.__version__ == m.group(1)
