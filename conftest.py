"""
Shared test doubles for the kubeNs test suite.

Nothing here talks to a cluster or to the real ~/.kube/config.
"""
import copy
import logging

import pytest

from kubeNs.constants import OP_GET_NAMESPACE
from kubeNs.core.context import SessionConfig, SessionContext
from kubeNs.core.k8s_api import NamespaceDirectory
from kubeNs.errors import ClusterQueryError, ErrorKind
from kubeNs.namespace.picker import NamespacePicker

# Configure logging for tests
logging.basicConfig(level=logging.ERROR)


class MockNamespaceDirectory(NamespaceDirectory):
    """In-memory namespace directory that records every call"""

    def __init__(self, names=(), list_error=None, get_error=None, create_error=None):
        self.names = list(names)
        self.list_error = list_error
        self.get_error = get_error
        self.create_error = create_error
        self.calls = []

    def list_names(self):
        self.calls.append(("list", None))
        if self.list_error:
            raise self.list_error
        return sorted(self.names)

    def get(self, name):
        self.calls.append(("get", name))
        if self.get_error:
            raise self.get_error
        if name not in self.names:
            raise ClusterQueryError(OP_GET_NAMESPACE, f"namespace '{name}' not found", kind=ErrorKind.NOT_FOUND)

    def create(self, name):
        self.calls.append(("create", name))
        if self.create_error:
            raise self.create_error
        self.names.append(name)

    def count(self, operation):
        return len([c for c in self.calls if c[0] == operation])


class MockSessionStore:
    """Session store keeping the configuration in memory"""

    def __init__(self, config, persist_error=None):
        self.config = config
        self.persist_error = persist_error
        self.persisted = []

    def load(self):
        return self.config

    def persist(self, config):
        if self.persist_error:
            raise self.persist_error
        self.persisted.append(copy.deepcopy(config))


class MockPicker(NamespacePicker):

    def __init__(self, choice=None, error=None):
        self.choice = choice
        self.error = error
        self.calls = []

    def pick_with_default(self, options, prompt, default, help_text):
        self.calls.append((list(options), prompt, default, help_text))
        if self.error:
            raise self.error
        return self.choice if self.choice is not None else default


def build_session_config(current="kind-dev", namespace="dev", server="https://127.0.0.1:6443",
                         others=None):
    """SessionConfig with a current context plus optional extra {name: namespace} contexts"""
    contexts = {}
    servers = {}
    if current:
        contexts[current] = SessionContext(name=current, namespace=namespace, cluster=f"{current}-cluster",
                                           user=f"{current}-user")
        servers[f"{current}-cluster"] = server
    for name, ns in (others or {}).items():
        contexts[name] = SessionContext(name=name, namespace=ns, cluster="other-cluster", user="other-user")
        servers["other-cluster"] = "https://other.example.com"
    return SessionConfig(contexts=contexts, servers=servers, current_context_name=current or "",
                         path="/tmp/kubeconfig-under-test", raw={"current-context": current} if current else {})


@pytest.fixture
def session_config():
    return build_session_config()


@pytest.fixture
def make_session_config():
    return build_session_config
