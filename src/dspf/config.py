"""Parser configuration.

Every fixed-format constant the engine relies on lives here so a caller can
point the parser at a shop-specific variant (different sequence width,
subfile keyword, default geometry) without touching the column logic.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

DEFAULT_PREDEFINED_SIZES: dict[str, tuple[int, int]] = {
    "*DS3": (24, 80),
    "*DS4": (27, 132),
}


class ConfigError(ValueError):
    """Raised when a configuration payload cannot be turned into a ParserConfig."""


@dataclass(frozen=True)
class ParserConfig:
    sequence_width: int = 5
    comment_marker: str = "A*"
    record_marker: str = "R"
    reference_marker: str = "R"
    hidden_usage: str = "H"
    negation_marker: str = "N"
    continuation_marker: str = "-"
    subfile_keyword: str = "SFL"
    default_rows: int = 24
    default_cols: int = 80
    default_name: str = "*DS3"
    predefined_sizes: dict[str, tuple[int, int]] = field(
        default_factory=lambda: dict(DEFAULT_PREDEFINED_SIZES)
    )

    @staticmethod
    def from_mapping(payload: dict[str, Any]) -> ParserConfig:
        known = {f.name for f in fields(ParserConfig)}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for name in ("sequence_width", "default_rows", "default_cols"):
            if name in payload:
                kwargs[name] = _positive_int(name, payload[name], allow_zero=name == "sequence_width")
        for name in (
            "comment_marker",
            "record_marker",
            "reference_marker",
            "hidden_usage",
            "negation_marker",
            "continuation_marker",
            "subfile_keyword",
            "default_name",
        ):
            if name in payload:
                value = payload[name]
                if not isinstance(value, str) or not value:
                    raise ConfigError(f"{name} must be a non-empty string")
                kwargs[name] = value
        for name in ("record_marker", "reference_marker", "hidden_usage", "continuation_marker"):
            if name in kwargs and len(kwargs[name]) != 1:
                raise ConfigError(f"{name} must be a single character")
        if "predefined_sizes" in payload:
            kwargs["predefined_sizes"] = _predefined_sizes(payload["predefined_sizes"])
        return ParserConfig(**kwargs)


def _positive_int(name: str, value: Any, allow_zero: bool = False) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer")
    if value < 0 or (value == 0 and not allow_zero):
        raise ConfigError(f"{name} must be positive")
    return value


def _predefined_sizes(raw: Any) -> dict[str, tuple[int, int]]:
    if not isinstance(raw, dict):
        raise ConfigError("predefined_sizes must be a mapping of NAME: [rows, cols]")
    sizes: dict[str, tuple[int, int]] = {}
    for name, dims in raw.items():
        if not isinstance(dims, (list, tuple)) or len(dims) != 2:
            raise ConfigError(f"predefined size {name} must be [rows, cols]")
        rows = _positive_int(f"{name} rows", dims[0])
        cols = _positive_int(f"{name} cols", dims[1])
        sizes[str(name).upper()] = (rows, cols)
    return sizes


def load_config(path: Path) -> ParserConfig:
    if path.suffix.lower() in {".yml", ".yaml"}:
        payload = yaml.safe_load(path.read_text())
    else:
        payload = json.loads(path.read_text())
    if payload is None:
        return ParserConfig()
    if not isinstance(payload, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return ParserConfig.from_mapping(payload)


def sample_config() -> dict[str, Any]:
    return {
        "sequence_width": 5,
        "comment_marker": "A*",
        "continuation_marker": "-",
        "subfile_keyword": "SFL",
        "default_rows": 24,
        "default_cols": 80,
        "default_name": "*DS3",
        "predefined_sizes": {"*DS3": [24, 80], "*DS4": [27, 132]},
    }
