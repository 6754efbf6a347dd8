# kubeNs/core/__init__.py
"""
kubeNs core: session context model, kubeconfig store and namespace directory.
"""
