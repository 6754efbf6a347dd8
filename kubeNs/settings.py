# kubeNs/settings.py
"""
Runtime settings for kubeNs.

Values are resolved in order: explicit override (command line), environment,
then the defaults from kubeNs.constants.
"""
import logging
import os
from dataclasses import dataclass

from kubeNs.constants import (
    DEFAULT_KUBECONFIG_PATH,
    DEFAULT_LOG_LEVEL,
    ENV_KUBECONFIG,
    ENV_LOG_LEVEL,
    INCLUSTER_NAMESPACE_FILE,
)

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    kubeconfig_path: str
    log_level: str = DEFAULT_LOG_LEVEL
    incluster_namespace_file: str = INCLUSTER_NAMESPACE_FILE

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def _kubeconfig_from_env(environ) -> str | None:
    # KUBECONFIG may hold a list of files; changes are written to the first one
    value = environ.get(ENV_KUBECONFIG, "")
    for path in value.split(os.pathsep):
        if path.strip():
            return path.strip()
    return None


def load_settings(kubeconfig_path: str | None = None,
                  log_level: str | None = None,
                  environ=None) -> Settings:
    """Builds the Settings for one run."""
    environ = os.environ if environ is None else environ

    path = kubeconfig_path or _kubeconfig_from_env(environ) or DEFAULT_KUBECONFIG_PATH
    level = log_level or environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL

    settings = Settings(kubeconfig_path=os.path.expanduser(path), log_level=level)
    logger.debug(f"Resolved settings: {settings}")
    return settings
