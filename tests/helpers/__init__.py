"""Test helper modules for the Contemplate test suite.

- io_utils: writing YAML and template files under tmp_path
- memory_fs: in-memory FileSystem that records every probe
"""
from __future__ import annotations
