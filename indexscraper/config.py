# === FILE: indexscraper/config.py ===
"""
Loading and validation of the IndexScraper configuration.
Pydantic describes the schema and checks the data.
"""
from __future__ import annotations

import errno
import json
import os
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SelectorMethod(str, Enum):
    """How the index link selector is evaluated."""

    XPATH = "xpath"
    CSS = "css"

    @classmethod
    def _missing_(cls, value: object) -> Optional[SelectorMethod]:
        # "CSS", " xpath " and the like
        if isinstance(value, str):
            folded = value.strip().lower()
            for member in cls:
                if member.value == folded:
                    return member
        return None


class ScraperConfig(BaseModel):
    """Settings for one scraper: where the index lives and how politely to fetch."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    index_url: str = Field("", description="URL of the page listing the instances.")
    selector: str = Field("", description="XPath or CSS selector of the index anchors.")
    selector_method: SelectorMethod = Field(
        SelectorMethod.XPATH, description="Selector language: xpath or css."
    )
    verbose: bool = Field(False, description="Log every fetch and stash access at INFO.")
    debug: bool = Field(True, description="Stash instance pages and reuse stashed copies.")
    index_debug: bool = Field(False, description="Same as debug, for index pages.")
    nice_sleep_time: float = Field(
        30.0, ge=0, description="Seconds to wait before every network request."
    )
    stash_folder: Path = Field(Path("stashes"), description="Directory of stashed pages.")
    user_agent: str = Field("IndexScraper/0.1", min_length=1, description="User-Agent header.")
    timeout: float = Field(60.0, gt=0, description="Timeout of one request (seconds).")
    log_file: Optional[Path] = Field(None, description="Also write the log to this file.")

    @field_validator("selector_method", mode="before")
    def _parse_selector_method(cls, v: Any) -> Any:
        if isinstance(v, str):
            return SelectorMethod(v)
        return v

    @field_validator("stash_folder", "log_file", mode="before")
    def _expand_paths(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ScraperConfig:
    """
    Read YAML or JSON and return a validated ScraperConfig.
    Raises FileNotFoundError when the config file does not exist.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return ScraperConfig(**data)
