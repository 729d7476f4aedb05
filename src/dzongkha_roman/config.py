"""
Converter configuration loaded from TOML.

Only behaviour knobs live here; the grapheme and exception tables are
compiled in.  Example dzongkha_roman.toml:

    [converter]
    max_window = 3            # widest multi-token exception window
    devoicing_marker = "’"    # written after a devoiced initial
    punctuation_marker = "."  # written for shad / nyis shad
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from dzongkha_roman.assembler import DEFAULT_DEVOICING_MARKER

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "dzongkha_roman.toml"


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    max_window: int = 3
    devoicing_marker: str = DEFAULT_DEVOICING_MARKER
    punctuation_marker: str = "."

    def __post_init__(self) -> None:
        if isinstance(self.max_window, bool) or not isinstance(self.max_window, int):
            raise ValueError(f"max_window must be an integer, got {self.max_window!r}")
        if self.max_window < 1:
            raise ValueError(f"max_window must be at least 1, got {self.max_window}")
        if not isinstance(self.devoicing_marker, str) or not self.devoicing_marker:
            raise ValueError("devoicing_marker must be a non-empty string")
        if not isinstance(self.punctuation_marker, str):
            raise ValueError("punctuation_marker must be a string")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConverterConfig:
        """Build from the [converter] table; unknown keys are logged and ignored."""
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown [converter] key: %s", key)
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_toml(cls, config_path: str | Path) -> ConverterConfig:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)

        logger.debug("Loaded config from %s", config_path)
        return cls.from_dict(cfg.get("converter", {}))


def load_config(config_path: str | Path | None = None) -> ConverterConfig:
    """Load an explicit config, else ./dzongkha_roman.toml, else defaults."""
    if config_path is not None:
        return ConverterConfig.from_toml(config_path)
    candidate = Path(DEFAULT_CONFIG_NAME)
    if candidate.exists():
        return ConverterConfig.from_toml(candidate)
    return ConverterConfig()
