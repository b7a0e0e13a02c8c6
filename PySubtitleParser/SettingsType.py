from __future__ import annotations
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

SettingType: TypeAlias = str | int | float | bool | None

class SettingsError(Exception):
    """Raised when a setting cannot be coerced to the expected type."""
    pass

class SettingsType(dict[str, SettingType]):
    """
    Settings dictionary with type-safe getters. None values are never stored, so a setting
    that is passed as None keeps its previous (default) value.
    """
    def __init__(self, settings : Mapping[str,SettingType]|None = None):
        super().__init__()
        self.update(settings or {})

    def get_int(self, key: str, default: int|None = None) -> int|None:
        """Get an integer setting with type safety"""
        return self._get_number(key, default, int)

    def get_float(self, key: str, default: float|None = None) -> float|None:
        """Get a float setting with type safety"""
        return self._get_number(key, default, float)

    def get_str(self, key: str, default: str|None = None) -> str|None:
        """Get a string setting"""
        value = self.get(key, default)
        return None if value is None else str(value)

    def update(self, other=(), /, **kwds) -> None:
        """Update settings, filtering out None values"""
        items = dict(other.items() if hasattr(other, 'items') else other)
        items.update(kwds)
        super().update({ key: value for key, value in items.items() if value is not None })

    def _get_number(self, key : str, default : Any, convert : Callable[[Any], Any]) -> Any:
        value = self.get(key, default)
        if value is None:
            return None

        # bool is an int subclass, but True is not a frame rate
        if not isinstance(value, bool) and isinstance(value, (int, float, str)):
            try:
                return convert(value)
            except ValueError:
                pass

        raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {value!r} to {convert.__name__}")
