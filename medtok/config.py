# medtok/config.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_CONFIG_PATH = "configs/default.yaml"
ENV_CONFIG_PATH = "MEDTOK_CONFIG"
ENV_UNITS_LIST_PATH = "MEDTOK_UNITS_LIST_PATH"


class TokenizerCfg(BaseModel):
    # units_list_path: newline-delimited unit list replacing the bundled one.
    # None -> use medtok/tokenization/data/units.txt
    units_list_path: Optional[Path] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("units_list_path", mode="before")
    @classmethod
    def _blank_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class Config(BaseModel):
    tokenizer: TokenizerCfg = TokenizerCfg()
    model_config = ConfigDict(extra="ignore")

# --- Back-compat for flat YAML ---
_FLAT_KEYS = {"units_list_path"}

def _normalize_data(data: dict[str, Any]) -> dict[str, Any]:
    if not data:
        return {}
    data = dict(data)
    flat = {k: data.pop(k) for k in list(data.keys()) if k in _FLAT_KEYS}
    if flat:
        section = data.get("tokenizer") or {}
        data["tokenizer"] = {**flat, **section}
    return data

def load_config(path: str | None = DEFAULT_CONFIG_PATH) -> Config:
    data: dict[str, Any] = {}
    if path:
        p = Path(path)
        if p.exists():
            try:
                with p.open("r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise RuntimeError(f"Failed to parse YAML at {path}: {e}") from e
    if not isinstance(data, dict):
        raise RuntimeError(f"Config at {path} must be a mapping, got {type(data).__name__}")
    return Config(**_normalize_data(data))


def apply_env_overrides(cfg: Config) -> None:
    """
    Override knobs from environment variables.
    Supported:
      MEDTOK_UNITS_LIST_PATH
        path to a newline-delimited unit list; an empty value clears any
        configured path so the bundled list is used.
    """
    raw = os.getenv(ENV_UNITS_LIST_PATH)
    if raw is None:
        return
    raw = raw.strip()
    cfg.tokenizer.units_list_path = Path(raw) if raw else None


def resolve_config() -> Config:
    """Config file named by MEDTOK_CONFIG (or the default path), then env overrides."""
    cfg = load_config(os.getenv(ENV_CONFIG_PATH) or DEFAULT_CONFIG_PATH)
    apply_env_overrides(cfg)
    return cfg
