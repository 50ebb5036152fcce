import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'contemplate' and tests/ as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from contemplate.core.engine import Engine
from helpers.memory_fs import MemoryFileSystem


@pytest.fixture(autouse=True)
def _isolate_contemplate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop CONTEMPLATE_* variables inherited from the developer's shell."""
    import os

    for key in list(os.environ):
        if key.startswith("CONTEMPLATE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Empty default template directory."""
    root = tmp_path / "templates"
    root.mkdir()
    return root


@pytest.fixture
def engine(template_root: Path) -> Engine:
    """Engine with ``template_root`` as default directory and ``py`` extension."""
    return Engine(template_root)


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem(dirs=["/site/templates", "/site/emails", "/site/shared", "/site/legacy"])
