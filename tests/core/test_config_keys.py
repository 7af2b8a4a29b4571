import yaml
from pathlib import Path


def test_config_contains_expected_keys():
    data = yaml.safe_load(Path("config.yaml").read_text())
    assert data["search"]["obstacle_value"] == 1
    assert data["logging"]["global_level"] == "INFO"
    assert data["demo"]["grid"] == "maze"
    assert data["demo"]["replay_interval_seconds"] == 0.5
