# kubeNs/core/k8s_api.py
"""
Namespace directory: the cluster side of kubeNs.

Lists, reads and creates Namespace objects through the Kubernetes CoreV1 API.
Failures are raised as ClusterQueryError with an ErrorKind so callers can tell
"not found" apart from every other failure without knowing about ApiException.
"""
import json
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from kubernetes import client, config
from kubernetes.client.exceptions import ApiException

from kubeNs.constants import (
    OP_CREATE_CLIENT,
    OP_CREATE_NAMESPACE,
    OP_GET_NAMESPACE,
    OP_LIST_NAMESPACES,
)
from kubeNs.errors import ClusterQueryError, ErrorKind

logger = logging.getLogger(__name__)


class NamespaceDirectory(ABC):
    """Read/create access to the namespaces of one cluster."""

    @abstractmethod
    def list_names(self) -> List[str]:
        """Returns the names of all namespaces, sorted."""
        pass

    @abstractmethod
    def get(self, name: str) -> None:
        """
        Checks that namespace ``name`` exists.

        Raises:
            ClusterQueryError: kind NOT_FOUND if it does not exist, OTHER for any other failure
        """
        pass

    @abstractmethod
    def create(self, name: str) -> None:
        pass


def create_core_v1_api(kubeconfig_path: Optional[str] = None) -> client.CoreV1Api:
    """
    Builds a CoreV1Api from the kubeconfig, falling back to the in-cluster
    service account configuration.
    """
    try:
        config.load_kube_config(config_file=kubeconfig_path)
    except config.ConfigException as e_conf:
        logger.info(f"Could not load kubeconfig ({e_conf}), trying in-cluster configuration")
        try:
            config.load_incluster_config()
        except config.ConfigException as e_incluster:
            raise ClusterQueryError(OP_CREATE_CLIENT, e_conf) from e_incluster
    return client.CoreV1Api()


def describe_api_exception(e: ApiException) -> str:
    """Short description of an ApiException, using the API message when the body has one."""
    description = f"{e.reason} (Status: {e.status})"
    if e.body:
        try:
            error_body_json = json.loads(e.body)
            message = error_body_json.get('message') if isinstance(error_body_json, dict) else None
            if message:
                description = f"{description} - {message}"
        except (json.JSONDecodeError, TypeError):
            logger.debug(f"K8S API Error Body (not valid JSON): {str(e.body)[:500]}")
    return description


class KubernetesNamespaceDirectory(NamespaceDirectory):
    """NamespaceDirectory backed by the Kubernetes API."""

    def __init__(self, api: Optional[client.CoreV1Api] = None, kubeconfig_path: Optional[str] = None):
        self._api = api
        self.kubeconfig_path = kubeconfig_path

    @property
    def api(self) -> client.CoreV1Api:
        if self._api is None:
            self._api = create_core_v1_api(self.kubeconfig_path)
        return self._api

    def list_names(self) -> List[str]:
        api = self.api
        try:
            namespace_list = api.list_namespace()
        except ApiException as e:
            raise ClusterQueryError(OP_LIST_NAMESPACES, describe_api_exception(e)) from e
        except Exception as e:
            raise ClusterQueryError(OP_LIST_NAMESPACES, e) from e

        names = [ns_obj.metadata.name for ns_obj in namespace_list.items
                 if ns_obj.metadata and ns_obj.metadata.name]
        return sorted(names)

    def get(self, name: str) -> None:
        api = self.api
        try:
            api.read_namespace(name=name)
        except ApiException as e:
            if e.status == 404:
                raise ClusterQueryError(OP_GET_NAMESPACE, f"namespace '{name}' not found",
                                        kind=ErrorKind.NOT_FOUND) from e
            raise ClusterQueryError(f'{OP_GET_NAMESPACE} "{name}"', describe_api_exception(e)) from e
        except Exception as e:
            raise ClusterQueryError(f'{OP_GET_NAMESPACE} "{name}"', e) from e

    def create(self, name: str) -> None:
        api = self.api
        namespace_body = client.V1Namespace(
            api_version="v1",
            kind="Namespace",
            metadata=client.V1ObjectMeta(name=name),
        )
        try:
            api.create_namespace(body=namespace_body)
            logger.info(f"Created namespace '{name}'")
        except ApiException as e:
            # 409 is a conflict, this occurs if the namespace already exists
            if e.status == 409:
                logger.info(f"Namespace '{name}' already exists")
                return
            raise ClusterQueryError(f"{OP_CREATE_NAMESPACE} {name}", describe_api_exception(e)) from e
        except Exception as e:
            raise ClusterQueryError(f"{OP_CREATE_NAMESPACE} {name}", e) from e
