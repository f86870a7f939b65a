"""
Shared fixtures for Browser Sim tests.
"""

import pytest

from browser_sim.settings_store import SettingsStore


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point all browser data at a temporary directory."""
    home = tmp_path / "browser_sim_home"
    monkeypatch.setenv("BROWSER_SIM_HOME", str(home))
    monkeypatch.delenv("BROWSER_SIM_SEARCH_ENGINE", raising=False)
    monkeypatch.delenv("BROWSER_SIM_DEBUG", raising=False)
    SettingsStore.reset_instance()
    yield home
    SettingsStore.reset_instance()
