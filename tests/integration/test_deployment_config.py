"""Settings that keep the API and the engine processes working together."""

import tomllib
from pathlib import Path

DOMAIN_TOML = Path(__file__).resolve().parents[2] / "src" / "marketplace" / "domain.toml"

IN_PROCESS_PROVIDERS = {"memory", "inline"}


def _config():
    with DOMAIN_TOML.open("rb") as f:
        return tomllib.load(f)


def _async_overlays(config):
    return [
        name
        for name, section in config.items()
        if isinstance(section, dict) and section.get("event_processing") == "async"
    ]


class TestDeploymentConfig:
    def test_production_processes_events_in_the_engine(self):
        assert "production" in _async_overlays(_config())

    def test_async_overlays_share_an_event_store(self):
        config = _config()
        for overlay in _async_overlays(config):
            event_store = {**config.get("event_store", {}), **config[overlay].get("event_store", {})}
            assert event_store["provider"] not in IN_PROCESS_PROVIDERS, overlay
            assert event_store.get("database_uri"), overlay

    def test_async_overlays_share_a_database(self):
        config = _config()
        for overlay in _async_overlays(config):
            database = config[overlay].get("databases", {}).get("default", config["databases"]["default"])
            assert database["provider"] not in IN_PROCESS_PROVIDERS, overlay
