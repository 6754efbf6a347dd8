# kubeNs/__init__.py
"""
kubeNs - view or change the current namespace of your Kubernetes context.
"""

__version__ = "0.1.0"
