# src/montyhall/config.py
"""Configuration schema and helpers for the Monty Hall simulator.

Defines dataclasses for simulation and reporting settings and utilities for
loading YAML overlays and applying ``section.option=value`` overrides.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, get_args, get_origin, get_type_hints

import yaml  # type: ignore[import-untyped]

from montyhall.utils.yaml_helpers import expand_dotted_keys

# ─────────────────────────────────────────────────────────────────────────────
# Dataclasses (schema)
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class SimConfig:
    """Simulation parameters."""

    n_games: int = 100
    seed: int | None = None
    n_jobs: int = 1


@dataclass
class ReportConfig:
    """How batch summaries are presented."""

    digits: int = 2
    alpha: float = 0.05  # Wilson interval significance level


@dataclass
class AppConfig:
    """Top-level configuration container."""

    sim: SimConfig = field(default_factory=SimConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


# ─────────────────────────────────────────────────────────────────────────────
# Loading
# ─────────────────────────────────────────────────────────────────────────────


def _deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated recursively with ``overlay``."""
    result: dict[str, Any] = dict(base)
    for key, val in overlay.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(val, Mapping):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _annotation_contains(annotation: Any, target: type) -> bool:
    """Recursively inspect type annotations for the presence of ``target``."""
    if annotation is None:
        return False
    if annotation is target:
        return True
    origin = get_origin(annotation)
    if origin is None:
        return False
    return any(_annotation_contains(arg, target) for arg in get_args(annotation))


def _build(cls: type, section: Mapping[str, Any]) -> Any:
    """Instantiate dataclass ``cls`` from a mapping, rejecting unknown keys."""
    if not isinstance(section, Mapping):
        raise TypeError(f"Section for {cls.__name__} must be a mapping, got {section!r}")
    names = {f.name for f in dataclasses.fields(cls)}
    unknown = set(section) - names
    if unknown:
        raise AttributeError(f"Unknown option(s) {sorted(unknown)} for {cls.__name__}")
    return cls(**dict(section))


def load_app_config(*overlays: Path) -> AppConfig:
    """Deterministically merge one or more YAML overlays into an :class:`AppConfig`.

    Files are read in the order provided, dotted keys are expanded, and later
    overlays always win.
    """
    data: dict[str, Any] = {}
    for path in overlays:
        with Path(path).open("r", encoding="utf-8") as fh:
            overlay = yaml.safe_load(fh) or {}
        if not isinstance(overlay, Mapping):
            raise TypeError(f"Config file {path} must contain a mapping")
        data = _deep_merge(data, expand_dotted_keys(overlay))

    unknown = set(data) - {"sim", "report"}
    if unknown:
        raise AttributeError(f"Unknown config section(s): {sorted(unknown)}")

    return AppConfig(
        sim=_build(SimConfig, data.get("sim", {})),
        report=_build(ReportConfig, data.get("report", {})),
    )


def _coerce(value: str, current: Any, annotation: Any | None = None) -> Any:
    """Coerce ``value`` to the type of ``current``."""
    if value.lower() in {"none", "null"} and _annotation_contains(annotation, type(None)):
        return None
    if isinstance(current, bool) or _annotation_contains(annotation, bool):
        val_lower = value.lower()
        if val_lower in {"1", "true", "yes", "on"}:
            return True
        if val_lower in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"Cannot parse boolean value from {value!r}")
    if isinstance(current, int) or _annotation_contains(annotation, int):
        return int(value)
    if isinstance(current, float) or _annotation_contains(annotation, float):
        return float(value)
    return value


def apply_dot_overrides(cfg: AppConfig, pairs: list[str]) -> AppConfig:
    """Apply ``section.option=value`` overrides to *cfg*."""
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Invalid override {pair!r}")
        key, raw = pair.split("=", 1)
        if "." not in key:
            raise ValueError(f"Invalid override {pair!r}")
        section_name, option = key.split(".", 1)
        if not hasattr(cfg, section_name):
            raise AttributeError(f"Unknown config section {section_name!r}")
        section = getattr(cfg, section_name)
        if not hasattr(section, option):
            raise AttributeError(f"Unknown option {option!r} in section {section_name!r}")
        annotation = get_type_hints(type(section)).get(option)
        setattr(section, option, _coerce(raw, getattr(section, option), annotation))
    return cfg


__all__ = [
    "SimConfig",
    "ReportConfig",
    "AppConfig",
    "load_app_config",
    "apply_dot_overrides",
]
