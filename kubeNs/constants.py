# kubeNs/constants.py
"""
This module defines constants used throughout the kubeNs application.
"""
import os

# Default Values
DEFAULT_NAMESPACE = "default"
DEFAULT_KUBECONFIG_PATH = os.path.join("~", ".kube", "config")
DEFAULT_LOG_LEVEL = "WARNING"

# Mounted into every pod that runs with a service account
INCLUSTER_NAMESPACE_FILE = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"

# Environment variables
ENV_KUBECONFIG = "KUBECONFIG"
ENV_LOG_LEVEL = "KUBENS_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# --- Interactive picker ---
PICK_NAMESPACE_PROMPT = "Change namespace:"
PICK_NAMESPACE_HELP = "pick the kubernetes namespace for the current kubernetes cluster"

# --- Operation names used when wrapping errors ---
OP_LOAD_CONFIG = "loading Kubernetes configuration"
OP_CREATE_CLIENT = "creating kubernetes client"
OP_LIST_NAMESPACES = "loading namespaces"
OP_LIST_NAMESPACE_NAMES = "retrieving the names of the namespaces"
OP_PICK_NAMESPACE = "picking the namespace"
OP_GET_NAMESPACE = "getting namespace"
OP_CREATE_NAMESPACE = "unable to create namespace"
OP_UPDATE_CONFIG = "failed to update the kube config"

# --- Result messages ---
MSG_NOW_USING = "Now using namespace '{namespace}' on server '{server}'."
MSG_USING_FROM_CONTEXT = "Using namespace '{namespace}' from context named '{context}' on server '{server}'."
MSG_USING_NO_CONTEXT = "Using namespace '{namespace}' on server '{server}'. No context - probably a unit test or pod?"
MSG_NO_KUBE_CONTEXT = "No kube context - probably in a unit test or pod?"
MSG_NAMESPACE_NOT_YET = "namespace {namespace} does not exist yet"
MSG_NO_CONTEXT_DEFINED = "there is no context defined in your Kubernetes configuration - we may be inside a test case or pod?"

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130
