"""
Tests for configuration loading.
"""
import json
from unittest.mock import patch
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main
from src.config import DEFAULT_CONFIG, BASE_URL, load_config, save_config


class TestLoadConfig:
    """Test load_config and save_config."""

    def test_missing_explicit_file_creates_defaults(self, tmp_path):
        config_file = tmp_path / "config.json"

        cfg = load_config(str(config_file))

        assert cfg == DEFAULT_CONFIG
        assert config_file.exists()
        assert json.loads(config_file.read_text(encoding="utf-8"))["base_url"] == BASE_URL

    def test_file_values_merge_over_defaults(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"base_url": "https://staging.test/api"}), encoding="utf-8")

        cfg = load_config(str(config_file))

        assert cfg["base_url"] == "https://staging.test/api"
        assert cfg["timeout"] is None
        assert "log_file" in cfg

    def test_invalid_json_falls_back_to_defaults(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json", encoding="utf-8")

        assert load_config(str(config_file)) == DEFAULT_CONFIG

    def test_save_round_trip(self, tmp_path):
        config_file = tmp_path / "nested" / "config.json"
        cfg = dict(DEFAULT_CONFIG, timeout=15)

        save_config(cfg, str(config_file))

        assert load_config(str(config_file))["timeout"] == 15

    def test_missing_default_file_is_not_written(self, tmp_path):
        """Should return defaults without creating the implicit config file"""
        config_file = tmp_path / "config.json"

        with patch("src.config.CONFIG_FILE", str(config_file)):
            cfg = load_config()

        assert cfg == DEFAULT_CONFIG
        assert not config_file.exists()

    @patch("main.setup_logging")
    @patch("main.run")
    def test_plain_cli_run_leaves_no_config_file(self, mock_run, mock_logging, tmp_path):
        """Should not write config.json when --config is not given"""
        config_file = tmp_path / "config.json"

        with patch("src.config.CONFIG_FILE", str(config_file)):
            assert main.main([]) == 0

        mock_run.assert_called_once()
        assert not config_file.exists()
