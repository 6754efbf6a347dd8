# kubeNs/namespace/reporter.py
"""
Formats the message shown at the end of a namespace command.
"""
import logging
from dataclasses import dataclass

from kubeNs.constants import (
    MSG_NAMESPACE_NOT_YET,
    MSG_NO_KUBE_CONTEXT,
    MSG_NOW_USING,
    MSG_USING_FROM_CONTEXT,
    MSG_USING_NO_CONTEXT,
)

_ICONS = {
    logging.INFO: "ℹ️",
    logging.WARNING: "⚠️",
}


@dataclass
class Report:
    level: int
    message: str

    @property
    def icon(self) -> str:
        return _ICONS.get(self.level, "ℹ️")

    def __str__(self):
        return f"{self.icon} {self.message}"


class ResultReporter:

    def changed(self, namespace: str, server: str) -> Report:
        return Report(logging.INFO, MSG_NOW_USING.format(namespace=namespace, server=server))

    def using(self, namespace: str, context_name: str, server: str) -> Report:
        return Report(logging.INFO, MSG_USING_FROM_CONTEXT.format(namespace=namespace, context=context_name,
                                                                  server=server))

    def no_context(self) -> Report:
        return Report(logging.WARNING, MSG_NO_KUBE_CONTEXT)

    def no_config(self, namespace: str, server: str) -> Report:
        return Report(logging.INFO, MSG_USING_NO_CONTEXT.format(namespace=namespace, server=server))

    def not_found_ignored(self, namespace: str) -> Report:
        return Report(logging.INFO, MSG_NAMESPACE_NOT_YET.format(namespace=namespace))
