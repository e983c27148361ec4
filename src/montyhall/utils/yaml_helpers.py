# src/montyhall/utils/yaml_helpers.py
"""
YAML parsing helpers for config overlays.

``expand_dotted_keys`` turns ``{"sim.n_games": 500}`` into
``{"sim": {"n_games": 500}}`` so overlays may use either spelling.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _merge_into(target: dict[str, Any], key: str, value: Any) -> None:
    existing = target.get(key)
    if isinstance(existing, dict) and isinstance(value, dict):
        for sub_key, sub_value in value.items():
            _merge_into(existing, sub_key, sub_value)
    else:
        target[key] = value


def expand_dotted_keys(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Return a nested dict from *mapping* that may contain dotted keys.

    Raises
    ------
    TypeError
        If a dotted key would descend through a key already holding a scalar.
    """

    result: dict[str, Any] = {}
    for raw_key, raw_value in mapping.items():
        value = expand_dotted_keys(raw_value) if isinstance(raw_value, Mapping) else raw_value
        if not (isinstance(raw_key, str) and "." in raw_key):
            _merge_into(result, raw_key, value)
            continue
        parts = [part for part in raw_key.split(".") if part]
        if not parts:
            continue
        *parents, leaf = parts
        target = result
        for part in parents:
            nxt = target.setdefault(part, {})
            if not isinstance(nxt, dict):
                raise TypeError(
                    f"Cannot expand dotted key {raw_key!r}; {part!r} is already a scalar"
                )
            target = nxt
        _merge_into(target, leaf, value)
    return result


__all__ = ["expand_dotted_keys"]
