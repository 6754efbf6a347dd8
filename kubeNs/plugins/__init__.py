# kubeNs/plugins/__init__.py
"""
Default plugin versions.
"""

from .versions import PLUGINS, PluginVersion, create_jx_plugin, plugins_table

__all__ = ['PLUGINS', 'PluginVersion', 'create_jx_plugin', 'plugins_table']
