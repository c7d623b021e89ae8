"""Domain layer for the extension store.

Pure Python - no UI dependencies.
"""

from extstore.domain.extension import (
    Extension,
    LocalExtension,
    LocalExtensionList,
    compare_versions,
)

__all__ = ["Extension", "LocalExtension", "LocalExtensionList", "compare_versions"]
