# kubeNs/core/context/session_context.py
"""
In-memory view of a kubeconfig: the named contexts, the server address of each
cluster and which context is current.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class SessionContext:
    """A named kubeconfig context. Only ``namespace`` is ever changed by kubeNs."""
    name: str
    namespace: str = ""
    cluster: str = ""
    user: str = ""


@dataclass
class SessionConfig:
    contexts: Dict[str, SessionContext] = field(default_factory=dict)
    servers: Dict[str, str] = field(default_factory=dict)
    current_context_name: str = ""
    path: Optional[str] = None
    # Parsed document as loaded; the store writes every key back untouched
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True when nothing was loaded, e.g. running inside a pod without a kubeconfig."""
        return not self.raw and not self.contexts

    def current_context(self) -> Optional[SessionContext]:
        """
        Returns the current context, or None when no context is current or the
        current context name does not match any context.
        """
        if not self.current_context_name:
            return None
        return self.contexts.get(self.current_context_name)

    def server(self, context: Optional[SessionContext]) -> str:
        if context is None:
            return ""
        return self.servers.get(context.cluster, "")

    def current_server(self) -> str:
        return self.server(self.current_context())

    def current_namespace(self) -> str:
        ctx = self.current_context()
        return ctx.namespace if ctx else ""

    def __str__(self):
        ctx = self.current_context()
        if ctx is None:
            return "Session: no current context"
        return (f"Session: context='{ctx.name}', namespace='{ctx.namespace or '-'}', "
                f"server='{self.server(ctx) or '-'}'")
