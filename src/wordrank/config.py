"""Configuration management for wordrank.

Parses wordrank.toml files with support for:
- Default word list, threshold and policy
- Logging level
- Telemetry settings
- Declarative scoring policies

Example wordrank.toml structure:

    words = ["ada", "haskell", "scala", "java", "rust"]
    threshold = 1
    policy = "combined"

    [logging]
    level = "DEBUG"

    [telemetry]
    enabled = true
    exporter = "otlp"
    endpoint = "${OTEL_EXPORTER_OTLP_ENDPOINT}"

    [policies.vowels]
    bonus = { e = 2, o = 1 }
    penalty = { z = 3 }
"""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from .errors import ConfigError
from .policies import BUILTIN_POLICIES, PolicySpec, ScoringPolicy, register

if sys.version_info >= (3, 11):
    import tomllib as toml
else:
    import tomli as toml

CONFIG_FILENAME = "wordrank.toml"
DEFAULT_WORDS = ["ada", "haskell", "scala", "java", "rust"]


def _expand_env_vars(value: Any) -> Any:
    """Recursively expand ${VAR} and $VAR environment variable references."""
    if isinstance(value, str):

        def replace_var(match):
            var_name = match.group(1) or match.group(2)
            return os.environ.get(var_name, match.group(0))

        pattern = r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}|\$([A-Za-z_][A-Za-z0-9_]*)"
        return re.sub(pattern, replace_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


def _table(path: Path, data: dict[str, Any], key: str) -> dict[str, Any]:
    """Return data[key] as a table, or an empty one when absent."""
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"{path}: [{key}] must be a table")
    return value


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class TelemetryConfig:
    """Tracing configuration."""

    enabled: bool = False
    exporter: str = "console"  # "console" or "otlp"
    endpoint: Optional[str] = None
    service_name: str = "wordrank"


@dataclass
class RankConfig:
    """Complete wordrank configuration."""

    words: list[str] = field(default_factory=lambda: list(DEFAULT_WORDS))
    threshold: int = 1
    policy: str = "base"

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)

    # Declarative policies (key = policy name)
    policies: dict[str, PolicySpec] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path = Path(CONFIG_FILENAME)) -> RankConfig:
        """Load configuration from a wordrank.toml file.

        Returns defaults when the file does not exist. Expands ${VAR}
        environment variable references in string values.
        """
        if not path.exists():
            return cls()

        try:
            data = _expand_env_vars(toml.loads(path.read_text(encoding="utf-8")))
        except (OSError, toml.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to parse {path}: {e}") from e

        config = cls()

        words = data.get("words", config.words)
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ConfigError(f"{path}: 'words' must be a list of strings")
        config.words = list(words)

        threshold = data.get("threshold", config.threshold)
        if isinstance(threshold, bool) or not isinstance(threshold, int):
            raise ConfigError(f"{path}: 'threshold' must be an integer")
        config.threshold = threshold
        config.policy = str(data.get("policy", config.policy))

        if "logging" in data:
            log_data = _table(path, data, "logging")
            config.logging = LoggingConfig(
                level=str(log_data.get("level", "WARNING")).upper(),
            )

        if "telemetry" in data:
            tel = _table(path, data, "telemetry")
            if not isinstance(tel.get("enabled", False), bool):
                raise ConfigError(f"{path}: telemetry 'enabled' must be true or false")
            if tel.get("exporter", "console") not in ("console", "otlp"):
                raise ConfigError(f"{path}: telemetry exporter must be 'console' or 'otlp'")
            config.telemetry = TelemetryConfig(
                enabled=tel.get("enabled", False),
                exporter=tel.get("exporter", "console"),
                endpoint=tel.get("endpoint"),
                service_name=tel.get("service_name", "wordrank"),
            )

        for name, spec_data in _table(path, data, "policies").items():
            if not isinstance(spec_data, dict):
                raise ConfigError(f"{path}: [policies.{name}] must be a table")
            try:
                config.policies[name] = PolicySpec.model_validate(spec_data)
            except ValidationError as e:
                raise ConfigError(f"{path}: invalid policy '{name}': {e}") from e

        return config

    def register_policies(self) -> list[ScoringPolicy]:
        """Build and register every configured policy."""
        for name in self.policies:
            if name in BUILTIN_POLICIES:
                raise ConfigError(f"policy '{name}' would replace a built-in policy")
        return [register(spec.build(name)) for name, spec in self.policies.items()]


def load_project_config(start_dir: Path = Path(".")) -> RankConfig:
    """Load configuration, searching up from start_dir."""
    current = start_dir.resolve()
    while current != current.parent:
        config_path = current / CONFIG_FILENAME
        if config_path.exists():
            return RankConfig.load(config_path)
        current = current.parent

    # No config found, return defaults
    return RankConfig()


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_WORDS",
    "LoggingConfig",
    "TelemetryConfig",
    "RankConfig",
    "load_project_config",
]
