"""Configuration for seeding registered defaults.

A defaults file lists the stored values a store falls back to when a key has
never been written, e.g.::

    suite_name: com.example.app
    log_level: INFO
    defaults:
      theme: dark
      launch_count: 0
      favorite_ids: [1, 2, 3]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, Field, field_validator

from wrapped_defaults.core.stored_types import is_stored_value


class DefaultsConfig(BaseModel):
    suite_name: str = "standard"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    defaults: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("defaults")
    @classmethod
    def validate_defaults(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        bad = sorted(k for k, value in v.items() if not is_stored_value(value))
        if bad:
            raise ValueError(f"defaults hold values a preferences store cannot persist: {bad}")
        return v

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "DefaultsConfig":
        """
        Load a defaults configuration from a JSON or YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the suffix is not .json, .yaml or .yml
        """
        config_file = Path(path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(config_file, "r") as f:
            if config_file.suffix == ".json":
                data = json.load(f)
            elif config_file.suffix in (".yaml", ".yml"):
                import yaml

                data = yaml.safe_load(f)
            else:
                raise ValueError(
                    f"Unsupported config format: {config_file.suffix}. "
                    "Use .json or .yaml"
                )

        return cls.model_validate(data or {})
