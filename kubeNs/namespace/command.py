# kubeNs/namespace/command.py
"""
One run of the ``namespace`` command.

Loads the session, works out the target namespace, switches to it when it
differs from the current one and produces the final report. Displaying the
current namespace (no target, or batch mode) is the same run without a switch.
"""
import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from kubeNs.constants import DEFAULT_NAMESPACE, INCLUSTER_NAMESPACE_FILE
from kubeNs.core.context import SessionConfig
from kubeNs.core.k8s_api import NamespaceDirectory
from kubeNs.namespace.picker import NamespacePicker
from kubeNs.namespace.reporter import Report, ResultReporter
from kubeNs.namespace.selector import NamespaceSelector
from kubeNs.namespace.switcher import NamespaceSwitcher, SwitchOutcome, SwitchStatus

logger = logging.getLogger(__name__)


@dataclass
class RunRequest:
    explicit_namespace: str = ""
    create_if_missing: bool = False
    quiet_if_missing: bool = False
    batch_mode: bool = False

    @classmethod
    def from_args(cls, args: List[str], create: bool = False, quiet: bool = False,
                  batch_mode: bool = False) -> "RunRequest":
        return cls(
            explicit_namespace=args[0] if args else "",
            create_if_missing=create,
            quiet_if_missing=quiet,
            batch_mode=batch_mode,
        )


@dataclass
class CommandResult:
    report: Report
    namespace: str
    outcome: Optional[SwitchOutcome] = None


class NamespaceCommand:

    def __init__(self, store, directory: NamespaceDirectory, picker: NamespacePicker,
                 reporter: Optional[ResultReporter] = None,
                 incluster_namespace_file: str = INCLUSTER_NAMESPACE_FILE):
        self.store = store
        self.directory = directory
        self.reporter = reporter or ResultReporter()
        self.incluster_namespace_file = incluster_namespace_file
        self.selector = NamespaceSelector(picker)
        self.switcher = NamespaceSwitcher(directory, store)

    def current_namespace(self, session_config: SessionConfig) -> str:
        """
        The namespace of the current context. Without a context, the service
        account namespace when running in a pod, else 'default'.
        """
        if session_config.current_context() is not None:
            return session_config.current_namespace() or DEFAULT_NAMESPACE
        if os.path.exists(self.incluster_namespace_file):
            try:
                with open(self.incluster_namespace_file, "r", encoding="utf-8") as f_stream:
                    namespace = f_stream.read().strip()
                if namespace:
                    return namespace
            except OSError as e:
                logger.debug(f"Could not read in-cluster namespace file: {e}")
        return DEFAULT_NAMESPACE

    def run(self, request: RunRequest) -> CommandResult:
        session_config = self.store.load()
        if session_config.is_empty:
            logger.info("No kubeconfig loaded; running without a session context")
        else:
            logger.debug(f"Loaded {session_config}")
        current_ns = self.current_namespace(session_config)
        logger.debug(f"Current namespace is '{current_ns}'")

        target = self.selector.resolve(request, current_ns, self.directory.list_names)

        if target and target != current_ns:
            outcome = self.switcher.switch(target, session_config,
                                           create_if_missing=request.create_if_missing,
                                           quiet_if_missing=request.quiet_if_missing)
            return CommandResult(self._report_switch(outcome), target, outcome)

        namespace = current_ns or target
        server = session_config.current_server()
        ctx = session_config.current_context()
        if ctx is None:
            report = self.reporter.no_config(namespace, server)
        else:
            report = self.reporter.using(namespace, ctx.name, server)
        return CommandResult(report, namespace)

    def _report_switch(self, outcome: SwitchOutcome) -> Report:
        if outcome.status is SwitchStatus.NOT_FOUND_IGNORED:
            return self.reporter.not_found_ignored(outcome.namespace)
        if outcome.status is SwitchStatus.NO_CONTEXT:
            return self.reporter.no_context()

        server = outcome.config.server(outcome.context)
        if outcome.status is SwitchStatus.ALREADY_CURRENT:
            return self.reporter.using(outcome.namespace, outcome.context.name, server)
        return self.reporter.changed(outcome.context.namespace, server)
