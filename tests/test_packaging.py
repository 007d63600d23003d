import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = os.path.dirname(os.path.dirname(__file__))


def load_pyproject():
    with open(os.path.join(ROOT, "pyproject.toml"), "rb") as f:
        return tomllib.load(f)


def test_installed_modules_exist_and_skip_entry_script():
    modules = load_pyproject()["tool"]["setuptools"]["py-modules"]
    assert "main" not in modules
    for name in modules:
        assert os.path.exists(os.path.join(ROOT, f"{name}.py"))


def test_console_script_targets_cli():
    scripts = load_pyproject()["project"]["scripts"]
    assert scripts["trie-autocomplete"] == "autocomplete:run_autocomplete"
