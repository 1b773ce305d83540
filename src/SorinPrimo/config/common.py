"""Typed reads from the YAML configuration tree.

Every value is read through a ``ConfigSection``, which knows its dotted key
path (``primo.inst``, ``filters[2].entries[0].variable``) so that a missing or
mistyped value is reported at the exact spot in the config file.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

# Marks a field with no default, i.e. a required one.
REQUIRED: Any = object()


class ConfigSection:
    """One mapping of the config tree paired with its key path."""

    def __init__(self, data: Mapping[str, Any], path: str) -> None:
        self.data = data
        self.path = path

    @classmethod
    def from_root(cls, raw: Mapping[str, Any], key: str, *, required: bool = False) -> ConfigSection:
        """Return the top-level section ``key``.

        Raises:
            ValueError: If the section is required but missing.
            TypeError: If the section is not a mapping.
        """
        value = raw.get(key)
        if value is None:
            if required:
                raise ValueError(f"Missing required config: {key}")
            return cls({}, key)
        return cls.from_value(value, key)

    @classmethod
    def from_value(cls, value: Any, path: str) -> ConfigSection:
        if not isinstance(value, Mapping):
            raise TypeError(f"{path} must be an object")
        return cls(value, path)

    def key(self, field: str) -> str:
        return f"{self.path}.{field}"

    def has(self, field: str) -> bool:
        return field in self.data

    def get_str(self, field: str, default: Any = REQUIRED) -> Any:
        return self._read(field, default, lambda v: isinstance(v, str), "a string")

    def get_bool(self, field: str, default: Any = REQUIRED) -> Any:
        return self._read(field, default, lambda v: isinstance(v, bool), "a boolean")

    def get_int(self, field: str, default: Any = REQUIRED) -> Any:
        return self._read(field, default, _is_int, "an integer")

    def get_float(self, field: str, default: Any = REQUIRED) -> Any:
        value = self._read(field, default, lambda v: _is_int(v) or isinstance(v, float), "a number")
        return float(value) if value is not None else None

    def get_str_list(self, field: str, default: Any = REQUIRED) -> Any:
        items = self._read(field, default, lambda v: isinstance(v, list), "a list")
        if items is None:
            return None
        for idx, item in enumerate(items):
            if not isinstance(item, str):
                raise TypeError(f"{self.key(field)}[{idx}] must be a string")
        return list(items)

    def get_sections(self, field: str) -> list[ConfigSection]:
        """Return the optional list of mappings under ``field`` (empty when absent)."""
        return section_list(self.data.get(field, []), self.key(field))

    def _read(self, field: str, default: Any, accepts: Callable[[Any], bool], noun: str) -> Any:
        """Fetch ``field`` and type-check it.

        A ``None`` default makes the field nullable as well as optional.
        """
        if field not in self.data:
            if default is REQUIRED:
                raise ValueError(f"Missing required config: {self.key(field)}")
            return default
        value = self.data[field]
        if value is None and default is None:
            return None
        if not accepts(value):
            raise TypeError(f"{self.key(field)} must be {noun}")
        return value


def section_list(value: Any, path: str) -> list[ConfigSection]:
    """Validate a list of mappings, naming each item ``path[idx]``."""
    if not isinstance(value, list):
        raise TypeError(f"{path} must be a list")
    return [ConfigSection.from_value(item, f"{path}[{idx}]") for idx, item in enumerate(value)]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
