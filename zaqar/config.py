"""
Configuration loading and validation for Zaqar.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from zaqar.collector import DEFAULT_SUBJECT_TEMPLATE
from zaqar.core import MatcherSpec, Source

DEFAULT_CONFIG_PATH = "/etc/zaqar/config.yaml"


class MatcherConfig(BaseModel):
    """A single matching rule."""
    kind: str  # "pattern", "substring", ...
    criteria: str

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        """Accept the compact [kind, criteria] form."""
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("matcher must be a [kind, criteria] pair")
            return {"kind": data[0], "criteria": data[1]}
        return data


class LogConfig(BaseModel):
    """Configuration for one monitored log file."""
    path: str = Field(..., min_length=1)
    matchers: list[MatcherConfig] = Field(default_factory=list)
    encoding: str = "utf-8"


class NotifierConfig(BaseModel):
    """Configuration for the report destination."""
    type: str  # "mailgun", "webhook", "console", etc.
    config: dict[str, Any] = Field(default_factory=dict)  # Type-specific configuration


class Config(BaseModel):
    """Main configuration for Zaqar."""
    notifier: NotifierConfig
    subject_template: str = DEFAULT_SUBJECT_TEMPLATE
    logs: dict[str, LogConfig] = Field(..., min_length=1)

    @field_validator("subject_template")
    @classmethod
    def _check_subject_template(cls, value: str) -> str:
        """Reject templates that use anything but the {name} field."""
        try:
            value.format(name="x")
        except (AttributeError, IndexError, KeyError, ValueError) as e:
            raise ValueError(f"subject_template must only use {{name}}: {e!r}") from e
        return value

    def sources(self) -> list[Source]:
        """Convert the configured logs into sources, in file order."""
        return [
            Source(
                name=name,
                path=log.path,
                matchers=tuple(MatcherSpec(m.kind, m.criteria) for m in log.matchers),
                encoding=log.encoding,
            )
            for name, log in self.logs.items()
        ]


def load_config(
    config_path: str | Path,
    fallback: str | Path | None = DEFAULT_CONFIG_PATH
) -> Config:
    """
    Load and validate configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file
        fallback: File to use when config_path does not exist

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If neither config file exists
        ValueError: If config is invalid
        yaml.YAMLError: If YAML parsing fails
    """
    path = Path(config_path)

    if not path.exists() and fallback is not None and Path(fallback).exists():
        path = Path(fallback)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with path.open('r', encoding='utf-8') as f:
        raw_config: dict[str, Any] = yaml.safe_load(f)

    try:
        return Config.model_validate(raw_config)
    except ValidationError as e:
        raise ValueError(f"Configuration validation error: {e}") from e
