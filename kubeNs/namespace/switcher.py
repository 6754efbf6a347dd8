# kubeNs/namespace/switcher.py
"""
Switches the current kubeconfig context to another namespace.
"""
import copy
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from kubeNs.constants import (
    MSG_NAMESPACE_NOT_YET,
    MSG_NO_CONTEXT_DEFINED,
    OP_CREATE_NAMESPACE,
    OP_GET_NAMESPACE,
    OP_UPDATE_CONFIG,
)
from kubeNs.core.context import SessionConfig, SessionContext
from kubeNs.core.k8s_api import NamespaceDirectory
from kubeNs.errors import ClusterQueryError, ConfigPersistError, NamespaceCreateError, NamespaceNotFound

logger = logging.getLogger(__name__)


class SwitchStatus(Enum):
    SWITCHED = "switched"
    ALREADY_CURRENT = "already_current"
    NO_CONTEXT = "no_context"
    NOT_FOUND_IGNORED = "not_found_ignored"


@dataclass
class SwitchOutcome:
    status: SwitchStatus
    namespace: str
    context: Optional[SessionContext] = None
    config: Optional[SessionConfig] = None
    created: bool = False


class NamespaceSwitcher:
    """
    Verifies the target namespace on the cluster (creating it when asked to)
    and stores it as the namespace of the current context.
    """

    def __init__(self, directory: NamespaceDirectory, store):
        self.directory = directory
        self.store = store

    def switch(self, target: str, session_config: SessionConfig,
               create_if_missing: bool = False, quiet_if_missing: bool = False) -> SwitchOutcome:
        """
        Switches the current context of ``session_config`` to ``target``.

        ``session_config`` itself is not modified; the change is made on a copy
        which is written through the store and returned in the outcome.

        When the namespace does not exist, ``quiet_if_missing`` takes priority
        over ``create_if_missing``: the outcome is NOT_FOUND_IGNORED and nothing
        is created or written.

        Raises:
            NamespaceNotFound: the namespace does not exist and neither flag is set
            NamespaceCreateError: creating the missing namespace failed
            ClusterQueryError: any other failure reading the namespace
            ConfigPersistError: the kubeconfig could not be written
        """
        created = False
        try:
            self.directory.get(target)
        except ClusterQueryError as e:
            if not e.is_not_found:
                raise ClusterQueryError(f'{OP_GET_NAMESPACE} "{target}"', e.cause or e) from e
            if quiet_if_missing:
                logger.info(MSG_NAMESPACE_NOT_YET.format(namespace=target))
                return SwitchOutcome(SwitchStatus.NOT_FOUND_IGNORED, target, config=session_config)
            if not create_if_missing:
                raise NamespaceNotFound(target) from e
            self._create(target)
            created = True

        new_config = copy.deepcopy(session_config)
        ctx = new_config.current_context()
        if ctx is None:
            logger.warning(MSG_NO_CONTEXT_DEFINED)
            return SwitchOutcome(SwitchStatus.NO_CONTEXT, target, config=session_config, created=created)

        if ctx.namespace == target:
            return SwitchOutcome(SwitchStatus.ALREADY_CURRENT, target, context=ctx,
                                 config=session_config, created=created)

        ctx.namespace = target
        try:
            self.store.persist(new_config)
        except OSError as e:
            raise ConfigPersistError(OP_UPDATE_CONFIG, e) from e

        logger.info(f"Context '{ctx.name}' now uses namespace '{target}'")
        return SwitchOutcome(SwitchStatus.SWITCHED, target, context=ctx, config=new_config, created=created)

    def _create(self, target: str) -> None:
        try:
            self.directory.create(target)
        except ClusterQueryError as e:
            raise NamespaceCreateError(f"{OP_CREATE_NAMESPACE} {target}", e.cause or e) from e
