"""Resource name parsing.

A raw name is either ``basename`` or ``namespace::basename``. The namespace
selects a registered folder; the type tag selects the file extension:

    >>> name = ResourceName.parse("emails::welcome", "__TEMPLATE__", folders, extensions)
    >>> name.file_name
    'welcome.tpl.html'
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..exceptions import EmptyBaseName, MalformedName
from .extension import FileExtensionTable
from .folders import Folder, FolderTable

NAMESPACE_SEPARATOR = "::"


@dataclass(frozen=True)
class ResourceName:
    """A parsed resource name.

    Attributes:
        raw: The name exactly as given by the caller
        namespace: Namespace part, or None for un-namespaced names
        folder: Folder registered for ``namespace``
        base_name: Name without namespace and extension
        type_tag: Type tag used to select the extension
        file_name: ``base_name`` plus the type's extension, if any
    """

    raw: str
    namespace: Optional[str]
    folder: Optional[Folder]
    base_name: str
    type_tag: Optional[str]
    file_name: str

    @classmethod
    def parse(
        cls,
        raw: str,
        type_tag: Optional[str],
        folders: FolderTable,
        extensions: FileExtensionTable,
    ) -> "ResourceName":
        """Parse ``raw`` into a name.

        Raises:
            MalformedName: separator appears more than once
            UnknownNamespace: namespace is not registered in ``folders``
            EmptyBaseName: nothing follows the namespace
        """
        parts = raw.split(NAMESPACE_SEPARATOR)

        if len(parts) == 1:
            namespace, base_name, folder = None, parts[0], None
        elif len(parts) == 2:
            namespace, base_name = parts
            folder = folders.lookup(namespace)
        else:
            raise MalformedName(
                f'The template name "{raw}" is not valid. '
                f'Do not use the folder namespace separator "{NAMESPACE_SEPARATOR}" more than once.',
                name=raw,
            )

        if base_name == "":
            raise EmptyBaseName(
                f'The template name "{raw}" is not valid. The template name cannot be empty.',
                name=raw,
            )

        extension = extensions.get(type_tag)
        file_name = base_name if extension is None else f"{base_name}.{extension}"

        return cls(
            raw=raw,
            namespace=namespace,
            folder=folder,
            base_name=base_name,
            type_tag=type_tag,
            file_name=file_name,
        )

    def __str__(self) -> str:
        return self.raw


__all__ = ["NAMESPACE_SEPARATOR", "ResourceName"]
