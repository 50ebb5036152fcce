"""File extension rules per type tag."""
from __future__ import annotations

from typing import Dict, Iterator, Mapping, Optional

DEFAULT_FILE_EXTENSION = "py"


class FileExtensionTable:
    """Map optional type tags to file extensions.

    A type tag lets several resolvables share one base name (a template, a GET
    controller and a POST controller named ``profile`` for instance) while
    living in different files. Lookups for a tag without its own entry fall
    back to the default extension.

    Typed entries may explicitly be ``None``, meaning "no extension" for that
    type even when a default exists.
    """

    def __init__(
        self,
        default: Optional[str] = DEFAULT_FILE_EXTENSION,
        typed: Optional[Mapping[str, Optional[str]]] = None,
    ) -> None:
        self._default: Optional[str] = None
        self._typed: Dict[str, Optional[str]] = {}
        self.set(default)
        for type_tag, extension in (typed or {}).items():
            self.set(extension, type_tag)

    @property
    def default(self) -> Optional[str]:
        return self._default

    def set(self, extension: Optional[str], type_tag: Optional[str] = None) -> "FileExtensionTable":
        """Set the extension for ``type_tag`` (or the default when ``type_tag`` is None).

        A leading dot is tolerated and stripped so ``".html"`` and ``"html"``
        behave the same.
        """
        if extension is not None:
            extension = extension[1:] if extension.startswith(".") else extension
        if type_tag is None:
            self._default = extension
        else:
            self._typed[type_tag] = extension
        return self

    def unset(self, type_tag: str) -> "FileExtensionTable":
        """Drop a typed entry so the tag falls back to the default again."""
        self._typed.pop(type_tag, None)
        return self

    def get(self, type_tag: Optional[str] = None) -> Optional[str]:
        """Return the extension for ``type_tag``, or the default extension."""
        if type_tag is not None and type_tag in self._typed:
            return self._typed[type_tag]
        return self._default

    def __contains__(self, type_tag: object) -> bool:
        return type_tag in self._typed

    def __iter__(self) -> Iterator[str]:
        return iter(self._typed)

    def as_dict(self) -> Dict[str, object]:
        return {"default": self._default, "types": dict(self._typed)}

    def __repr__(self) -> str:
        return f"FileExtensionTable(default={self._default!r}, typed={self._typed!r})"


__all__ = ["DEFAULT_FILE_EXTENSION", "FileExtensionTable"]
