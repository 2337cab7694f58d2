"""Read-only engine settings and the environment helpers behind them."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

ENV_PREFIX = "SHORTCUT_ENGINE_"

_TRUTHY = {"1", "true", "yes", "on"}

# Setting keys as the host persists them.
_HOST_KEYS = {
    "autoInsertListPrefix": "auto_insert_list_prefix",
    "useTab": "use_tab",
}


def env_value(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env_value(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Configuration consulted by actions; immutable for a whole command.

    ``use_tab`` is carried for hosts that indent new text themselves. Line
    insertion copies the existing indentation verbatim and never converts
    it between tabs and spaces.
    """

    auto_insert_list_prefix: bool = True
    use_tab: bool = False

    @classmethod
    def from_env(cls) -> "EngineSettings":
        defaults = cls()
        return cls(
            auto_insert_list_prefix=env_flag(
                "AUTO_INSERT_LIST_PREFIX", defaults.auto_insert_list_prefix
            ),
            use_tab=env_flag("USE_TAB", defaults.use_tab),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EngineSettings":
        """Build settings from host data, accepting camelCase or field names."""

        known = {item.name for item in fields(cls)}
        values: dict[str, bool] = {}
        for key, value in data.items():
            name = _HOST_KEYS.get(key, key)
            if name in known:
                values[name] = bool(value)
        return cls(**values)


__all__ = ["ENV_PREFIX", "EngineSettings", "env_flag", "env_value"]
