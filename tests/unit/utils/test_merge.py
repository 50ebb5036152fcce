from __future__ import annotations

from contemplate.core.utils.merge import deep_merge, merge_arrays


def test_merge_arrays_empty_override_replaces_base() -> None:
    assert merge_arrays([1, 2], []) == []


def test_merge_arrays_markers() -> None:
    assert merge_arrays([1, 2], [3]) == [3]
    assert merge_arrays([1, 2], ["+", 3]) == [1, 2, 3]
    assert merge_arrays([1, 2], ["=", 3]) == [3]


def test_deep_merge_nested_mappings() -> None:
    base = {"extensions": {"default": "py", "types": {"__TEMPLATE__": "html"}}}
    override = {"extensions": {"types": {"__HTTP_GET__": "get.py"}}}

    merged = deep_merge(base, override)

    assert merged == {
        "extensions": {
            "default": "py",
            "types": {"__TEMPLATE__": "html", "__HTTP_GET__": "get.py"},
        }
    }
    assert base["extensions"]["types"] == {"__TEMPLATE__": "html"}


def test_deep_merge_appends_folders() -> None:
    base = {"folders": [{"name": "a", "path": "a"}]}
    merged = deep_merge(base, {"folders": ["+", {"name": "b", "path": "b"}]})
    assert [f["name"] for f in merged["folders"]] == ["a", "b"]


def test_deep_merge_scalar_override() -> None:
    assert deep_merge({"directory": None}, {"directory": "templates"}) == {"directory": "templates"}
