from __future__ import annotations

from pathlib import Path

import pytest

from contemplate.core.engine import Engine
from contemplate.core.exceptions import ControllerError, FunctionNotFound, TemplateNotFound
from contemplate.core.templates.resolvable import (
    TYPE_CONTROLLER_DELEGATE,
    TYPE_CONTROLLER_GET,
    TYPE_CONTROLLER_POST,
    TYPE_TEMPLATE,
    Controller,
    Resolvable,
)
from helpers.io_utils import touch, write_python


@pytest.fixture
def site(engine: Engine) -> Engine:
    engine.set_file_extension("tpl.html", TYPE_TEMPLATE)
    engine.set_file_extension("get.py", TYPE_CONTROLLER_GET)
    engine.set_file_extension("post.py", TYPE_CONTROLLER_POST)
    engine.set_file_extension("delegate.py", TYPE_CONTROLLER_DELEGATE)
    return engine


def test_exists_and_path(site: Engine, template_root: Path) -> None:
    template = touch(template_root / "profile.tpl.html", "<h1>profile</h1>")
    resolvable = Resolvable(site, "profile", TYPE_TEMPLATE)

    assert resolvable.exists()
    assert resolvable.path() == template
    assert resolvable.type_tag == TYPE_TEMPLATE


def test_path_of_missing_resource_is_first_candidate(site: Engine, template_root: Path) -> None:
    resolvable = Resolvable(site, "missing", TYPE_TEMPLATE)

    assert not resolvable.exists()
    assert resolvable.path() == template_root / "missing.tpl.html"


def test_associated_resources(site: Engine, template_root: Path) -> None:
    touch(template_root / "profile.tpl.html")
    get = touch(template_root / "profile.get.py", "controller = lambda: 'get'\n")
    template = site.resolve("profile", TYPE_TEMPLATE)

    assert template.exists_associated(TYPE_CONTROLLER_GET)
    assert not template.exists_associated(TYPE_CONTROLLER_POST)
    assert template.path_associated(TYPE_CONTROLLER_GET) == get

    associated = template.resolve_associated(TYPE_CONTROLLER_GET, Controller)
    assert isinstance(associated, Controller)
    assert associated() == "get"


def test_path_associated_raises_on_miss(site: Engine) -> None:
    template = site.resolve("profile", TYPE_TEMPLATE)
    with pytest.raises(TemplateNotFound):
        template.path_associated(TYPE_CONTROLLER_POST)


def test_load_binds_params_and_returns_public_names(site: Engine, template_root: Path) -> None:
    write_python(
        template_root / "greeting.py",
        """
        _private = "hidden"
        message = f"Hello {name}"
        """,
    )

    namespace = site.resolve("greeting").load({"name": "Ada"})

    assert namespace["message"] == "Hello Ada"
    assert namespace["name"] == "Ada"
    assert "_private" not in namespace


def test_load_sees_fresh_content(site: Engine, template_root: Path) -> None:
    path = write_python(template_root / "value.py", "value = 1\n")
    resolvable = site.resolve("value")
    assert resolvable.load()["value"] == 1

    path.write_text("value = 2\n", encoding="utf-8")
    assert resolvable.load()["value"] == 2


def test_load_associated(site: Engine, template_root: Path) -> None:
    touch(template_root / "profile.tpl.html")
    write_python(template_root / "profile.delegate.py", "data = {'user': user}\n")

    template = site.resolve("profile", TYPE_TEMPLATE)
    assert template.load_associated({"user": "ada"}, TYPE_CONTROLLER_DELEGATE)["data"] == {"user": "ada"}


def test_call_function(site: Engine) -> None:
    site.register_function("shout", lambda value: value.upper() + "!")
    site.register_function("name_of", lambda resolvable, suffix: resolvable.name.raw + suffix)
    resolvable = site.resolve("anything")

    assert resolvable.call_function("name_of", "!") == "anything!"
    assert site.get_function("shout")("hi") == "HI!"
    with pytest.raises(FunctionNotFound):
        resolvable.call_function("whisper", "hi")


def test_controller_runs_declared_decorators(site: Engine, template_root: Path) -> None:
    write_python(
        template_root / "profile.get.py",
        """
        from contemplate.core import ControllerDecorator, with_decorators


        class Tag(ControllerDecorator):
            def __init__(self, label):
                self.label = label

            def __call__(self, target, next, args):
                args[0].append("enter " + self.label)
                result = next(args)
                args[0].append("exit " + self.label)
                return result


        @with_decorators(Tag("auth"), Tag("timing"))
        def controller(log):
            log.append("controller")
            return log
        """,
    )

    controller = site.resolve("profile", TYPE_CONTROLLER_GET, Controller)
    assert controller.call([[]]) == [
        "enter auth",
        "enter timing",
        "controller",
        "exit timing",
        "exit auth",
    ]


def test_controller_without_callable(site: Engine, template_root: Path) -> None:
    write_python(template_root / "broken.get.py", "controller = 42\n")

    with pytest.raises(ControllerError, match='does not define a callable "controller"'):
        site.resolve("broken", TYPE_CONTROLLER_GET, Controller).call()


def test_controller_missing_file(site: Engine) -> None:
    with pytest.raises(TemplateNotFound):
        site.resolve("nowhere", TYPE_CONTROLLER_POST, Controller).call()


def test_delegate(site: Engine, template_root: Path) -> None:
    write_python(template_root / "sidebar.delegate.py", "def controller(user):\n    return ['sidebar', user]\n")
    write_python(
        template_root / "profile.get.py",
        "def controller(user):\n    return 'profile'\n",
    )
    write_python(template_root / "profile.delegate.py", "def controller(user):\n    return 'profile-delegate ' + user\n")

    controller = site.resolve("profile", TYPE_CONTROLLER_GET, Controller)

    assert controller.delegate("sidebar", ["ada"]) == ["sidebar", "ada"]
    assert controller.delegate_associated(["ada"]) == "profile-delegate ada"


def test_controller_errors_propagate(site: Engine, template_root: Path) -> None:
    write_python(template_root / "fail.post.py", "def controller():\n    raise RuntimeError('nope')\n")

    with pytest.raises(RuntimeError, match="nope"):
        site.call_controller("fail", TYPE_CONTROLLER_POST)
