# workflow_validator/utils/config.py
from __future__ import annotations

import functools
import json
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ---------- Enums ----------

class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# ---------- Settings ----------

class Settings(BaseSettings):
    """
    Central configuration for the workflow validator.

    Values load in this order of precedence:
      1) Environment variables
      2) .env file in the working directory
      3) Defaults below
    """

    # ---- Inputs ----
    SETTINGS_FILE: Path = Field(default=Path("./settings.json"), description="Scan settings document")
    WORKFLOW_SCHEMA_FILE: Optional[Path] = Field(default=None, description="Override the packaged workflow schema")
    ICONS_DIR: Path = Field(default=Path("../../icons"))
    BUILTIN_ICON_PREFIX: str = Field(default="octicon", description="iconName prefix exempt from the file check")
    PROPERTIES_DIRNAME: str = Field(default="properties")

    # ---- Reporting ----
    GITHUB_ACTIONS: bool = Field(default=False, description="Emit GitHub Actions workflow commands")

    # ---- Logging ----
    LOG_LEVEL: LogLevel = Field(default=LogLevel.INFO)
    LOG_TO_FILE: bool = Field(default=False)
    LOG_FILE: Path = Field(default=Path("./workflow-validator.log"))
    COLORIZED_OUTPUT: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # CI runners export plenty of unrelated variables
    )

    @field_validator(
        "SETTINGS_FILE",
        "WORKFLOW_SCHEMA_FILE",
        "ICONS_DIR",
        "LOG_FILE",
        mode="before",
    )
    @classmethod
    def _coerce_to_path(cls, v):
        if isinstance(v, Path):
            return v
        return Path(str(v)) if v is not None else v

    @field_validator("SETTINGS_FILE", "ICONS_DIR", "LOG_FILE", mode="after")
    @classmethod
    def _absolutize(cls, v: Path):
        return v if v.is_absolute() else Path.cwd() / v

    @field_validator("WORKFLOW_SCHEMA_FILE", mode="after")
    @classmethod
    def _absolutize_optional(cls, v: Optional[Path]):
        if v is None:
            return v
        return v if v.is_absolute() else Path.cwd() / v

    @field_validator("PROPERTIES_DIRNAME")
    @classmethod
    def _dirname_non_empty(cls, v: str) -> str:
        v = v.strip()
        if not v or "/" in v or "\\" in v:
            raise ValueError("PROPERTIES_DIRNAME must be a single directory name")
        return v


# --------- Public accessor (memoized) ---------

@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and cache settings once per process.
    Call `get_settings.cache_clear()` if you need to reload after changing env.
    """
    return Settings()


# --------- Scan settings document ---------

class ScanSettings(BaseModel):
    """Contents of settings.json: the folders holding workflow files."""
    folders: list[str] = Field(..., description="Folders scanned in order")


def load_scan_settings(path: Path | str) -> ScanSettings:
    p = Path(path)
    if not p.exists():
        raise ValueError(f"Settings file not found: {p}")
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return ScanSettings.model_validate(data)
    except ValidationError as ve:
        lines = [f"Invalid settings '{p}':"]
        for e in ve.errors():
            loc = ".".join(str(part) for part in e.get("loc", []))
            msg = e.get("msg", "invalid value")
            lines.append(f"  - {loc or '<root>'}: {msg}")
        raise ValueError("\n".join(lines)) from ve
    except json.JSONDecodeError as je:
        raise ValueError(f"JSON parse error in {p}: {je}") from je
