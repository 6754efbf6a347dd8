# kubeNs/core/context/__init__.py
"""
kubeNs Core Context Module

Session context model shared by the store and the namespace workflow.
"""

from .session_context import SessionConfig, SessionContext

__all__ = ['SessionConfig', 'SessionContext']
