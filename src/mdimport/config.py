"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
INTRO_TEXT = "Click here to edit."
DOMAIN_PASSWORD = "123"


class Settings(BaseModel):
    app_name:        str = "mdimport"
    db_url:          str = "sqlite:///mdimport.db"
    asset_root:      str = Field(default="static", description="Base directory local image links resolve against")
    domain:          Optional[str] = Field(default=None, description="Target domain; None uses each subdirectory name")
    domain_password: str = Field(default=DOMAIN_PASSWORD, description="Temporary password for auto-provisioned domains")
    intro_text:      str = Field(default=INTRO_TEXT, description="Placeholder content treated as empty")
    log_level:       str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDIMPORT_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDIMPORT_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
