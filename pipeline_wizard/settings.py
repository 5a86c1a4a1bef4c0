"""Runtime settings read from the environment (and an optional .env file)."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "PIPELINE_WIZARD_"

SCHEMA_VERSION = "2.0.0"


class Settings(BaseModel):
    """Settings shared by the CLI, the stores and the importer."""

    model_config = ConfigDict(extra="ignore")

    log_level: str = Field("WARNING", description="Root log level for the CLI")
    verbose: bool = Field(False, description="Log at DEBUG regardless of log_level")
    spec_path: Optional[Path] = Field(
        None, description="Directory holding <pipeline>/spec.yaml files (default: bundled specs)"
    )
    store_dir: Path = Field(
        Path(".pipeline-wizard"), description="Directory used by the JSON file store"
    )
    schema_version: str = Field(SCHEMA_VERSION, description="Version tag written on save")


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from PIPELINE_WIZARD_* environment variables.

    Args:
        env_file: Optional .env path; by default python-dotenv searches upwards
                  from the working directory

    Returns:
        Validated Settings instance
    """
    load_dotenv(env_file)

    values = {}
    for key in Settings.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{key.upper()}")
        if raw is not None and raw != "":
            values[key] = raw

    return Settings(**values)
