"""Output flavors supported by the code generator."""

from __future__ import annotations

from enum import Enum
from typing import Union


class Flavor(Enum):
    """Plain JavaScript, or JavaScript with TypeScript-style annotations."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"

    @property
    def typed(self) -> bool:
        return self is Flavor.TYPESCRIPT

    @classmethod
    def coerce(cls, value: Union["Flavor", str, None]) -> "Flavor":
        """Accept a flavor, its name or ``None`` (the default flavor)."""
        if value is None or value == "":
            return cls.JAVASCRIPT
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = ", ".join(flavor.value for flavor in cls)
            raise ValueError(f"unsupported target language '{value}' (expected one of: {supported})") from None


__all__ = ["Flavor"]
