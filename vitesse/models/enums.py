from enum import Enum
from typing import Optional


class AssetKind(str, Enum):
    STYLESHEET = "css"
    SCRIPT = "js"

    @classmethod
    def from_extension(cls, extension: str) -> Optional["AssetKind"]:
        try:
            return cls(extension)
        except ValueError:
            return None
