#!/usr/bin/env python3
"""
kubeNs Kubeconfig Store Tests

Loads and persists real kubeconfig files in a temporary directory.
"""

import os
import stat
import sys
from pathlib import Path

import pytest
import yaml

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from kubeNs.core.kubeconfig import KubeconfigStore
from kubeNs.errors import ConfigLoadError

KUBECONFIG = """\
apiVersion: v1
kind: Config
preferences: {}
current-context: kind-dev
clusters:
- name: kind-dev
  cluster:
    server: https://127.0.0.1:6443
    certificate-authority-data: Y2VydA==
- name: prod-cluster
  cluster:
    server: https://prod.example.com
contexts:
- name: kind-dev
  context:
    cluster: kind-dev
    user: kind-dev
    namespace: dev
- name: prod
  context:
    cluster: prod-cluster
    user: admin
users:
- name: kind-dev
  user:
    token: secret-token
- name: admin
  user:
    token: admin-token
"""


@pytest.fixture
def kubeconfig_path(tmp_path):
    path = tmp_path / "config"
    path.write_text(KUBECONFIG)
    os.chmod(path, 0o600)
    return path


def test_load_reads_contexts_and_servers(kubeconfig_path):
    config = KubeconfigStore(str(kubeconfig_path)).load()

    assert config.current_context_name == "kind-dev"
    assert config.current_namespace() == "dev"
    assert config.current_server() == "https://127.0.0.1:6443"
    assert config.contexts["prod"].namespace == ""
    assert config.server(config.contexts["prod"]) == "https://prod.example.com"


def test_missing_file_loads_empty_config(tmp_path):
    config = KubeconfigStore(str(tmp_path / "missing")).load()

    assert config.is_empty
    assert config.current_context() is None


def test_invalid_yaml_raises_load_error(tmp_path):
    path = tmp_path / "config"
    path.write_text("contexts: [unclosed")

    with pytest.raises(ConfigLoadError) as excinfo:
        KubeconfigStore(str(path)).load()

    assert "loading Kubernetes configuration" in str(excinfo.value)


def test_non_mapping_document_raises_load_error(tmp_path):
    path = tmp_path / "config"
    path.write_text("- just\n- a list\n")

    with pytest.raises(ConfigLoadError):
        KubeconfigStore(str(path)).load()


def test_current_context_name_without_context(tmp_path):
    path = tmp_path / "config"
    path.write_text("current-context: gone\ncontexts: []\n")

    config = KubeconfigStore(str(path)).load()

    assert config.current_context_name == "gone"
    assert config.current_context() is None


def test_persist_changes_only_the_namespace(kubeconfig_path):
    store = KubeconfigStore(str(kubeconfig_path))
    config = store.load()
    config.current_context().namespace = "prod"

    store.persist(config)

    document = yaml.safe_load(kubeconfig_path.read_text())
    original = yaml.safe_load(KUBECONFIG)
    assert document["contexts"][0]["context"]["namespace"] == "prod"
    original["contexts"][0]["context"]["namespace"] = "prod"
    assert document == original


def test_persist_adds_namespace_to_context_without_one(kubeconfig_path):
    store = KubeconfigStore(str(kubeconfig_path))
    config = store.load()
    config.contexts["prod"].namespace = "jx"

    store.persist(config)

    reloaded = store.load()
    assert reloaded.contexts["prod"].namespace == "jx"
    assert reloaded.contexts["kind-dev"].namespace == "dev"


def test_persist_keeps_file_mode_and_leaves_no_temp_files(kubeconfig_path):
    store = KubeconfigStore(str(kubeconfig_path))
    config = store.load()
    config.current_context().namespace = "prod"

    store.persist(config)

    assert stat.S_IMODE(os.stat(kubeconfig_path).st_mode) == 0o600
    assert sorted(p.name for p in kubeconfig_path.parent.iterdir()) == ["config"]


def test_persist_failure_keeps_original_file(kubeconfig_path, monkeypatch):
    store = KubeconfigStore(str(kubeconfig_path))
    config = store.load()
    config.current_context().namespace = "prod"

    def failing_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", failing_replace)

    with pytest.raises(OSError):
        store.persist(config)

    assert kubeconfig_path.read_text() == KUBECONFIG
    assert sorted(p.name for p in kubeconfig_path.parent.iterdir()) == ["config"]


def test_persist_writes_through_symlinked_kubeconfig(tmp_path):
    dotfiles = tmp_path / "dotfiles"
    dotfiles.mkdir()
    real_file = dotfiles / "kubeconfig"
    real_file.write_text(KUBECONFIG)
    link = tmp_path / "config"
    link.symlink_to(real_file)
    store = KubeconfigStore(str(link))
    config = store.load()
    config.current_context().namespace = "prod"

    store.persist(config)

    assert link.is_symlink()
    assert yaml.safe_load(real_file.read_text())["contexts"][0]["context"]["namespace"] == "prod"
    assert sorted(p.name for p in dotfiles.iterdir()) == ["kubeconfig"]


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
