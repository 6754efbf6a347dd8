# kubeNs/plugins/versions.py
"""
Versions of the default plugins installed alongside the CLI.
"""
from dataclasses import dataclass
from typing import List

from tabulate import tabulate

JX_PLUGIN_PREFIX = "jx-"

# The version of each default plugin
ADMIN_VERSION = "0.0.117"
APPLICATION_VERSION = "0.0.1"
GITOPS_VERSION = "0.0.306"
JENKINS_VERSION = "0.0.22"
PIPELINE_VERSION = "0.0.20"
PREVIEW_VERSION = "0.0.82"
PROJECT_VERSION = "0.0.91"
PROMOTE_VERSION = "0.0.106"
SECRET_VERSION = "0.0.34"
TEST_VERSION = "0.0.18"
VERIFY_VERSION = "0.0.26"


@dataclass(frozen=True)
class PluginVersion:
    name: str
    version: str

    @property
    def binary(self) -> str:
        return f"{JX_PLUGIN_PREFIX}{self.name}"


def create_jx_plugin(name: str, version: str) -> PluginVersion:
    return PluginVersion(name=name, version=version)


PLUGINS: List[PluginVersion] = [
    create_jx_plugin("admin", ADMIN_VERSION),
    create_jx_plugin("application", APPLICATION_VERSION),
    create_jx_plugin("gitops", GITOPS_VERSION),
    create_jx_plugin("jenkins", JENKINS_VERSION),
    create_jx_plugin("pipeline", PIPELINE_VERSION),
    create_jx_plugin("preview", PREVIEW_VERSION),
    create_jx_plugin("project", PROJECT_VERSION),
    create_jx_plugin("promote", PROMOTE_VERSION),
    create_jx_plugin("secret", SECRET_VERSION),
    create_jx_plugin("test", TEST_VERSION),
    create_jx_plugin("verify", VERIFY_VERSION),
]


def plugins_table(plugins: List[PluginVersion] = None) -> str:
    plugins = PLUGINS if plugins is None else plugins
    rows = [[p.name, p.version, p.binary] for p in plugins]
    return tabulate(rows, headers=["Plugin", "Version", "Binary"], tablefmt="grid")
