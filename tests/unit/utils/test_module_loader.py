from __future__ import annotations

import sys
from pathlib import Path

import pytest

from contemplate.core.utils.loader import load_module_from_path, module_name_for, public_namespace
from helpers.io_utils import write_python


def test_module_name_for() -> None:
    assert module_name_for(Path("/x/profile.get.py")) == "contemplate.dynamic.profile"
    assert module_name_for(Path("/x/my-page.py"), "site") == "site.my_page"


def test_load_any_extension(tmp_path: Path) -> None:
    path = write_python(tmp_path / "profile.get.tpl", "value = 40 + offset\n")

    module = load_module_from_path(path, init_globals={"offset": 2})

    assert module.value == 42
    assert module.__file__ == str(path)
    assert module.__name__ not in sys.modules


def test_errors_propagate(tmp_path: Path) -> None:
    path = write_python(tmp_path / "broken.py", "raise LookupError('inside')\n")
    with pytest.raises(LookupError, match="inside"):
        load_module_from_path(path)


def test_no_bytecode_written(tmp_path: Path) -> None:
    path = write_python(tmp_path / "plain.py", "x = 1\n")
    load_module_from_path(path)
    assert not (tmp_path / "__pycache__").exists()


def test_public_namespace(tmp_path: Path) -> None:
    path = write_python(tmp_path / "names.py", "a = 1\n_b = 2\n")
    assert public_namespace(load_module_from_path(path)) == {"a": 1}
