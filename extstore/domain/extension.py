"""
Module: extension.py

Author: Michael Economou
Date: 2026-02-02

Extensions as listed by the store and as installed on this machine.
The store widgets only read these objects to decide labels, icons and tooltips.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Any

from extstore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_VERSION_PART = re.compile(r"\d+")


def _version_key(version: str) -> list[int]:
    """Split a dotted version into integers ("v1.2b" -> [1, 2])."""
    text = str(version).strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    parts = []
    for chunk in text.split("."):
        match = _VERSION_PART.match(chunk.strip())
        parts.append(int(match.group()) if match else 0)
    return parts


def compare_versions(a: str, b: str) -> int:
    """Compare two dotted versions.

    Missing trailing components count as 0, so "1.2" == "1.2.0".

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b

    """
    key_a = _version_key(a)
    key_b = _version_key(b)
    length = max(len(key_a), len(key_b))
    key_a += [0] * (length - len(key_a))
    key_b += [0] * (length - len(key_b))
    return (key_a > key_b) - (key_a < key_b)


@dataclass
class Extension:
    """An extension published on the store."""

    id: str
    name: str
    version: str
    description: str = ""
    icon_url: str = ""
    files: list[str] = field(default_factory=list)
    repository: str = ""


@dataclass
class LocalExtension:
    """An extension installed on this machine."""

    id: str
    name: str
    version: str
    install_dir: str = ""
    files: list[str] = field(default_factory=list)

    @classmethod
    def from_extension(cls, extension: Extension, install_dir: str) -> LocalExtension:
        return cls(
            id=extension.id,
            name=extension.name,
            version=extension.version,
            install_dir=install_dir,
            files=list(extension.files),
        )

    def current_version_is_older(self, version: str) -> bool:
        """Return True if ``version`` is newer than the installed one."""
        return compare_versions(self.version, version) < 0


class LocalExtensionList:
    """Installed extensions keyed by id, plus free-form store data.

    ``data`` holds values such as ``"newExtensions"``: the ids that appeared
    on the store since the last visit.
    """

    def __init__(
        self,
        extensions: list[LocalExtension] | None = None,
        data: dict[str, Any] | None = None,
    ):
        self.extensions: dict[str, LocalExtension] = {e.id: e for e in extensions or []}
        self.data: dict[str, Any] = dict(data or {})

    def get_data(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set_data(self, key: str, value: Any) -> None:
        self.data[key] = value

    def is_installed(self, extension: Extension) -> bool:
        return extension.id in self.extensions

    def check_files(self, local_extension: LocalExtension) -> bool:
        """Return True if every file of the extension exists in its install dir."""
        missing = [
            path
            for path in local_extension.files
            if not os.path.exists(os.path.join(local_extension.install_dir, path))
        ]
        if missing:
            logger.debug(
                "[LocalExtensionList] %s is missing %d file(s): %s",
                local_extension.id,
                len(missing),
                missing,
                extra={"dev_only": True},
            )
        return not missing

    def install(self, local_extension: LocalExtension) -> None:
        self.extensions[local_extension.id] = local_extension
        logger.info(
            "[LocalExtensionList] Registered %s v%s",
            local_extension.id,
            local_extension.version,
        )

    def uninstall(self, extension_id: str) -> LocalExtension:
        """Forget an installed extension.

        Raises:
            KeyError: if no extension with this id is installed

        """
        local_extension = self.extensions.pop(extension_id)
        logger.info("[LocalExtensionList] Removed %s", extension_id)
        return local_extension

    def __len__(self) -> int:
        return len(self.extensions)

    def __contains__(self, extension_id: str) -> bool:
        return extension_id in self.extensions
