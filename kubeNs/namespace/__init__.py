# kubeNs/namespace/__init__.py
"""
The namespace command: pick a target namespace, switch to it and report.
"""

from .command import CommandResult, NamespaceCommand, RunRequest
from .picker import ConsolePicker, NamespacePicker
from .reporter import Report, ResultReporter
from .selector import NamespaceSelector
from .switcher import NamespaceSwitcher, SwitchOutcome, SwitchStatus

__all__ = [
    'CommandResult',
    'ConsolePicker',
    'NamespaceCommand',
    'NamespacePicker',
    'NamespaceSelector',
    'NamespaceSwitcher',
    'Report',
    'ResultReporter',
    'RunRequest',
    'SwitchOutcome',
    'SwitchStatus',
]
