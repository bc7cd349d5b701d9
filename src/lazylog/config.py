"""Level configuration registry.

Maps logger names to their minimum severity. The registry is built once,
at process start, and handed to a ``LoggerFactory``; it never changes
afterwards.

YAML layout::

    root: INFO
    loggers:
      app.db: DEBUG
      app.db.pool: TRACE
"""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

import yaml
from pydantic import Field, field_validator

from lazylog.models.base import FrozenModel
from lazylog.models.enums import Severity
from lazylog.observability.logging import get_logger

LEVEL_ENV_VAR = "LOG_LEVEL"
CONFIG_ENV_VAR = "LAZYLOG_CONFIG"

logger = get_logger(__name__)


class LevelConfig(FrozenModel):
    """Immutable mapping of logger names to thresholds.

    Attributes:
        root: Threshold for any logger without a more specific entry.
        loggers: Thresholds keyed by dotted logger name.
    """

    root: Severity = Field(
        default=Severity.INFO,
        description="Threshold for loggers without a more specific entry.",
    )
    loggers: Mapping[str, Severity] = Field(
        default_factory=dict,
        validate_default=True,
        description="Thresholds keyed by dotted logger name.",
    )

    @field_validator("loggers", mode="after")
    @classmethod
    def _freeze_loggers(cls, value: Mapping[str, Severity]) -> Mapping[str, Severity]:
        return MappingProxyType(dict(value))

    def level_for(self, name: str) -> Severity:
        """Resolves the threshold for ``name``.

        The exact name wins, then the closest dotted ancestor, then the root.
        """
        candidate = name
        while candidate:
            if candidate in self.loggers:
                return self.loggers[candidate]
            if "." not in candidate:
                break
            candidate = candidate.rsplit(".", 1)[0]
        return self.root

    def with_root(self, root: Severity) -> "LevelConfig":
        return self.model_copy(update={"root": root})


def level_config_schema() -> dict[str, Any]:
    """Returns the JSON schema describing a level configuration file."""
    return LevelConfig.model_json_schema()


def read_level_file(path: Union[str, Path]) -> dict[str, Any]:
    """Reads a level configuration YAML file into a plain mapping.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Level configuration not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Level configuration must be a mapping, got {type(data).__name__}"
        )
    return data


def load_level_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> LevelConfig:
    """Builds a ``LevelConfig`` from a YAML file and the environment.

    Args:
        path: YAML file to read. Defaults to the ``LAZYLOG_CONFIG`` env var;
            without either, only defaults and ``LOG_LEVEL`` apply.
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        The resolved configuration. ``LOG_LEVEL`` overrides the root.
    """
    env = os.environ if environ is None else environ
    path = path or env.get(CONFIG_ENV_VAR)

    if path:
        config = LevelConfig.model_validate(read_level_file(path))
        logger.debug("Loaded level configuration from %s", path)
    else:
        config = LevelConfig()

    env_level = env.get(LEVEL_ENV_VAR)
    if env_level:
        config = config.with_root(Severity.parse(env_level))
        logger.debug("Root level overridden by %s=%s", LEVEL_ENV_VAR, env_level)

    return config
