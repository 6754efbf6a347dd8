# kubeNs/core/kubeconfig.py
"""
File-backed session context store.

Reads the kubeconfig into a SessionConfig and writes a modified SessionConfig
back. Writes replace the whole file in one step (temporary file + rename) and
keep every key of the original document that kubeNs does not manage.
"""
import copy
import logging
import os
import stat
import tempfile

import yaml

from kubeNs.constants import OP_LOAD_CONFIG
from kubeNs.core.context import SessionConfig, SessionContext
from kubeNs.errors import ConfigLoadError

logger = logging.getLogger(__name__)

_NEW_FILE_MODE = 0o600


class KubeconfigStore:
    """Loads and persists the kubeconfig at ``path``."""

    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def load(self) -> SessionConfig:
        """
        Loads the kubeconfig.

        A missing file is not an error: it yields an empty SessionConfig with no
        current context, which is what a process running inside a pod sees.

        Raises:
            ConfigLoadError: if the file cannot be read or is not a kubeconfig mapping
        """
        if not os.path.exists(self.path):
            logger.info(f"No kubeconfig found at '{self.path}'")
            return SessionConfig(path=self.path)

        try:
            with open(self.path, "r", encoding="utf-8") as f_stream:
                document = yaml.safe_load(f_stream) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(OP_LOAD_CONFIG, e) from e

        if not isinstance(document, dict):
            raise ConfigLoadError(OP_LOAD_CONFIG, f"'{self.path}' does not contain a kubeconfig mapping")

        contexts = {}
        for entry in document.get("contexts") or []:
            if not isinstance(entry, dict) or not entry.get("name"):
                continue
            details = entry.get("context") or {}
            contexts[entry["name"]] = SessionContext(
                name=entry["name"],
                namespace=details.get("namespace") or "",
                cluster=details.get("cluster") or "",
                user=details.get("user") or "",
            )

        servers = {}
        for entry in document.get("clusters") or []:
            if not isinstance(entry, dict) or not entry.get("name"):
                continue
            servers[entry["name"]] = (entry.get("cluster") or {}).get("server") or ""

        config = SessionConfig(
            contexts=contexts,
            servers=servers,
            current_context_name=document.get("current-context") or "",
            path=self.path,
            raw=document,
        )
        logger.debug(f"Loaded kubeconfig '{self.path}' with {len(contexts)} context(s)")
        return config

    def persist(self, config: SessionConfig) -> None:
        """
        Writes the namespaces held in ``config`` back to the kubeconfig file.

        Raises:
            OSError: if the file cannot be written
        """
        document = copy.deepcopy(config.raw) if config.raw else {"apiVersion": "v1", "kind": "Config"}

        for entry in document.get("contexts") or []:
            if not isinstance(entry, dict):
                continue
            ctx = config.contexts.get(entry.get("name"))
            if ctx is None:
                continue
            if entry.get("context") is None:
                entry["context"] = {}
            if (entry["context"].get("namespace") or "") != ctx.namespace:
                entry["context"]["namespace"] = ctx.namespace

        path = config.path or self.path
        try:
            content = yaml.safe_dump(document, default_flow_style=False, sort_keys=False)
        except yaml.YAMLError as e:
            raise OSError(f"could not serialise kubeconfig for '{path}': {e}") from e

        _write_atomically(path, content)
        logger.info(f"Updated kubeconfig '{path}'")


def _write_atomically(path: str, content: str) -> None:
    # Write through a symlinked kubeconfig instead of replacing the link
    path = os.path.realpath(path)
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    mode = stat.S_IMODE(os.stat(path).st_mode) if os.path.exists(path) else _NEW_FILE_MODE

    fd, tmp_path = tempfile.mkstemp(prefix=".kubeconfig-", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f_stream:
            f_stream.write(content)
            f_stream.flush()
            os.fsync(f_stream.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
