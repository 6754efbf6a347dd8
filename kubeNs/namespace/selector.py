# kubeNs/namespace/selector.py
"""
Decides which namespace a run should switch to.
"""
import logging
from typing import Callable, Iterable

from kubeNs.constants import OP_LIST_NAMESPACE_NAMES, OP_PICK_NAMESPACE, PICK_NAMESPACE_HELP, PICK_NAMESPACE_PROMPT
from kubeNs.errors import ClusterQueryError, SelectionError
from kubeNs.namespace.picker import NamespacePicker

logger = logging.getLogger(__name__)


class NamespaceSelector:

    def __init__(self, picker: NamespacePicker):
        self.picker = picker

    def resolve(self, request, current_namespace: str,
                available_names_fn: Callable[[], Iterable[str]]) -> str:
        """
        Returns the target namespace for ``request``.

        An explicit namespace always wins. In batch mode nothing is asked and an
        empty string is returned, meaning "keep the current namespace". Otherwise
        the user picks from the cluster's namespaces; a single namespace is
        chosen without asking.

        Raises:
            ClusterQueryError: if the namespace names could not be listed
            SelectionError: if the picker failed or was cancelled
        """
        if request.explicit_namespace:
            return request.explicit_namespace
        if request.batch_mode:
            logger.debug("Batch mode and no namespace given; keeping the current namespace")
            return ""

        try:
            names = sorted(available_names_fn())
        except ClusterQueryError as e:
            raise ClusterQueryError(OP_LIST_NAMESPACE_NAMES, e, kind=e.kind) from e

        if not names:
            return ""
        if len(names) == 1:
            return names[0]

        try:
            return self.picker.pick_with_default(names, PICK_NAMESPACE_PROMPT, current_namespace, PICK_NAMESPACE_HELP)
        except SelectionError as e:
            raise SelectionError(OP_PICK_NAMESPACE, e) from e
