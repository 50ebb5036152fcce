from __future__ import annotations

from pathlib import Path

import pytest

from contemplate.core.engine import Engine
from contemplate.core.exceptions import ConfigurationError, NoDefaultDirectory, TemplateNotFound
from contemplate.core.resolution import DefaultStrategy
from contemplate.core.templates.config import TemplateConfig
from helpers.memory_fs import MemoryFileSystem


def _engine(fs: MemoryFileSystem, directory: str | None = "/site/templates") -> Engine:
    return Engine(directory, "php", fs=fs)


def test_unnamespaced_name_uses_default_directory(memory_fs: MemoryFileSystem) -> None:
    memory_fs.add_file("/site/templates/home.php")
    engine = _engine(memory_fs)

    assert engine.path("home") == Path("/site/templates/home.php")


def test_unnamespaced_name_without_default_directory(memory_fs: MemoryFileSystem) -> None:
    engine = _engine(memory_fs, None)
    memory_fs.probes.clear()

    with pytest.raises(NoDefaultDirectory, match='"home" is not valid'):
        engine.path("home")
    assert memory_fs.file_probes() == []


def test_no_default_directory_is_not_a_miss(memory_fs: MemoryFileSystem) -> None:
    engine = _engine(memory_fs, None)
    assert not isinstance(NoDefaultDirectory("x"), TemplateNotFound)
    with pytest.raises(NoDefaultDirectory):
        engine.exists("home")


def test_namespaced_hit(memory_fs: MemoryFileSystem) -> None:
    memory_fs.add_file("/site/emails/welcome.php")
    engine = _engine(memory_fs).add_folder("emails", "/site/emails")

    assert engine.path("emails::welcome") == Path("/site/emails/welcome.php")


def test_namespaced_miss_lists_one_path(memory_fs: MemoryFileSystem) -> None:
    memory_fs.add_file("/site/templates/welcome.php")
    engine = _engine(memory_fs).add_folder("emails", "/site/emails")

    with pytest.raises(TemplateNotFound) as excinfo:
        engine.path("emails::welcome")

    assert excinfo.value.paths() == (Path("/site/emails/welcome.php"),)
    assert excinfo.value.name == "emails::welcome"
    assert str(excinfo.value) == (
        'The template "emails::welcome" could not be found at: "/site/emails/welcome.php"'
    )


def test_fallback_folders_searched_after_requested_folder(memory_fs: MemoryFileSystem) -> None:
    memory_fs.add_file("/site/legacy/welcome.php")
    engine = (
        _engine(memory_fs)
        .add_folder("emails", "/site/emails")
        .add_folder("shared", "/site/shared", fallback=True)
        .add_folder("legacy", "/site/legacy", fallback=True)
    )
    memory_fs.probes.clear()

    assert engine.path("emails::welcome") == Path("/site/legacy/welcome.php")
    assert memory_fs.file_probes() == [
        "/site/emails/welcome.php",
        "/site/shared/welcome.php",
        "/site/legacy/welcome.php",
    ]


def test_fallback_miss_lists_every_tried_path(memory_fs: MemoryFileSystem) -> None:
    engine = (
        _engine(memory_fs)
        .add_folder("shared", "/site/shared", fallback=True)
        .add_folder("emails", "/site/emails", fallback=True)
    )

    with pytest.raises(TemplateNotFound) as excinfo:
        engine.path("emails::welcome")

    # The fallback-marked requested folder also falls back to the default directory.
    assert [str(p) for p in excinfo.value.tried_paths] == [
        "/site/emails/welcome.php",
        "/site/shared/welcome.php",
        "/site/templates/welcome.php",
    ]
    assert [origin for origin, _p in excinfo.value.searched] == ["emails", "shared", "default"]


def test_default_directory_only_for_fallback_marked_folder(memory_fs: MemoryFileSystem) -> None:
    memory_fs.add_file("/site/templates/welcome.php")
    engine = (
        _engine(memory_fs)
        .add_folder("emails", "/site/emails")
        .add_folder("shared", "/site/shared", fallback=True)
    )

    with pytest.raises(TemplateNotFound):
        engine.path("emails::welcome")
    assert engine.path("shared::welcome") == Path("/site/templates/welcome.php")


def test_reverse_fallback_order(memory_fs: MemoryFileSystem) -> None:
    memory_fs.add_file("/site/shared/welcome.php")
    memory_fs.add_file("/site/legacy/welcome.php")
    engine = (
        _engine(memory_fs)
        .add_folder("emails", "/site/emails")
        .add_folder("shared", "/site/shared", fallback=True)
        .add_folder("legacy", "/site/legacy", fallback=True)
    )

    assert engine.path("emails::welcome") == Path("/site/shared/welcome.php")

    engine.set_resolution_strategy(DefaultStrategy(engine.config, fallback_order="reverse"))
    assert engine.path("emails::welcome") == Path("/site/legacy/welcome.php")


def test_unknown_fallback_order() -> None:
    with pytest.raises(ConfigurationError, match="Unknown fallback order"):
        DefaultStrategy(TemplateConfig(), fallback_order="random")


def test_resolution_is_idempotent(memory_fs: MemoryFileSystem) -> None:
    memory_fs.add_file("/site/templates/home.php")
    engine = _engine(memory_fs)

    assert engine.path("home") == engine.path("home")
    for _ in range(2):
        with pytest.raises(TemplateNotFound) as excinfo:
            engine.path("missing")
        assert excinfo.value.tried_paths == (Path("/site/templates/missing.php"),)


def test_no_caching_between_calls(memory_fs: MemoryFileSystem) -> None:
    engine = _engine(memory_fs)
    assert not engine.exists("late")

    memory_fs.add_file("/site/templates/late.php")
    assert engine.exists("late")

    memory_fs.remove_file("/site/templates/late.php")
    assert not engine.exists("late")


def test_configuration_changes_are_visible(memory_fs: MemoryFileSystem) -> None:
    memory_fs.add_file("/site/emails/welcome.html")
    engine = _engine(memory_fs).add_folder("emails", "/site/emails")

    assert not engine.exists("emails::welcome")
    engine.set_file_extension("html")
    assert engine.exists("emails::welcome")


def test_real_filesystem(tmp_path: Path) -> None:
    (tmp_path / "home.py").write_text("", encoding="utf-8")
    (tmp_path / "folder.py").mkdir()

    engine = Engine(tmp_path)
    assert engine.path("home") == tmp_path / "home.py"
    # Directories never count as matches.
    assert not engine.exists("folder")
