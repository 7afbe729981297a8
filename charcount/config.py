from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .presets import PresetName, parse_preset


DEFAULT_CONFIG_PATH = Path("config.toml")


@dataclass(frozen=True)
class CountDefaults:
    """Validated `[paths]`/`[count]` values; None means "not set"."""

    input: Path | None = None
    preset: PresetName | None = None
    top: int | None = None
    json: bool | None = None


@dataclass(frozen=True)
class CharcountConfig:
    raw: Dict[str, Any]

    @staticmethod
    def load(path: str | Path) -> "CharcountConfig":
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Config not found: {p}")
        data = _load_toml(p)
        if not isinstance(data, dict):
            raise ValueError("config.toml must parse to a table")
        return CharcountConfig(raw=data)

    def get(self, *keys: str, default: Any = None) -> Any:
        cur: Any = self.raw
        for k in keys:
            if not isinstance(cur, dict) or k not in cur:
                return default
            cur = cur[k]
        return cur

    def count_defaults(self) -> CountDefaults:
        inp = self.get("paths", "input")
        if inp is not None and not isinstance(inp, str):
            raise ValueError("[paths] input must be a string")

        preset = self.get("count", "preset")
        if preset is not None:
            if not isinstance(preset, str):
                raise ValueError("[count] preset must be a string")
            preset = parse_preset(preset)

        top = self.get("count", "top")
        # TOML booleans are ints in Python.
        if top is not None and (isinstance(top, bool) or not isinstance(top, int) or top < 0):
            raise ValueError("[count] top must be a non-negative integer")

        as_json = self.get("count", "json")
        if as_json is not None and not isinstance(as_json, bool):
            raise ValueError("[count] json must be true or false")

        return CountDefaults(
            input=Path(inp) if inp is not None else None,
            preset=preset,
            top=top,
            json=as_json,
        )


def load_optional_config(path: str | Path | None) -> CharcountConfig | None:
    """Load an explicit config, or ./config.toml when it exists, else None."""
    if path is not None:
        return CharcountConfig.load(path)
    if DEFAULT_CONFIG_PATH.exists():
        return CharcountConfig.load(DEFAULT_CONFIG_PATH)
    return None


def _load_toml(path: Path) -> Dict[str, Any]:
    import tomllib

    return tomllib.loads(path.read_text(encoding="utf-8"))
