"""Configuration and logging setup tests."""
import json
import logging

import pytest

from hyperroute import ConfigManager, ConfigurationError, RoutingSettings
from hyperroute.shared.configuration.settings import ApplicationSettings, LoggingSettings
from hyperroute.shared.utils.logging_utils import setup_logging


class TestSettings:
    """Settings defaults and validation"""

    def test_reference_cost_constants(self):
        settings = RoutingSettings()
        assert settings.ripping_cost == 5000.0
        assert settings.congestion_cost_multiplier == 10.0
        assert settings.max_iterations == 100_000

    def test_defaults_are_valid(self):
        errors = ApplicationSettings().validate()
        assert errors == {'routing': [], 'logging': []}

    def test_invalid_values_reported(self):
        settings = ApplicationSettings()
        settings.routing.ripping_cost = -1
        settings.routing.max_iterations = 0
        settings.logging.level = "LOUD"
        errors = settings.validate()
        assert len(errors['routing']) == 2
        assert len(errors['logging']) == 1

    def test_unbounded_iterations_allowed(self):
        assert RoutingSettings(max_iterations=None).validate() == []


class TestConfigManager:
    """JSON-backed settings"""

    def test_missing_file_uses_defaults_without_writing(self, tmp_path):
        path = tmp_path / "hyperroute.json"
        manager = ConfigManager(path)
        assert manager.get_settings().routing.ripping_cost == 5000.0
        assert not path.exists()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config" / "hyperroute.json"
        manager = ConfigManager(path)
        manager.update_routing_settings(ripping_cost=250.0, max_iterations=500)
        manager.save()

        reloaded = ConfigManager(path)
        assert reloaded.settings.routing.ripping_cost == 250.0
        assert reloaded.settings.routing.max_iterations == 500

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "hyperroute.json"
        path.write_text(json.dumps({'routing': {'congestion_cost_multiplier': 3.0}}))

        settings = ConfigManager(path).settings
        assert settings.routing.congestion_cost_multiplier == 3.0
        assert settings.routing.ripping_cost == 5000.0
        assert settings.logging.level == "INFO"

    def test_malformed_file_raises(self, tmp_path):
        path = tmp_path / "hyperroute.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            ConfigManager(path)

    def test_unknown_setting_ignored(self, tmp_path, caplog):
        manager = ConfigManager(tmp_path / "hyperroute.json")
        with caplog.at_level(logging.WARNING):
            manager.update_routing_settings(bogus=1)
        assert not hasattr(manager.settings.routing, 'bogus')
        assert "Unknown routing setting" in caplog.text

    def test_reset_to_defaults(self, tmp_path):
        manager = ConfigManager(tmp_path / "hyperroute.json")
        manager.update_routing_settings(ripping_cost=1.0)
        manager.reset_to_defaults()
        assert manager.settings.routing.ripping_cost == 5000.0

    def test_save_without_path_raises(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        manager = ConfigManager()
        with pytest.raises(ConfigurationError):
            manager.save()


class TestSetupLogging:
    """Root logger configuration"""

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "logs" / "hyperroute.log"
        settings = LoggingSettings(
            level="DEBUG", console_output=False, file_output=True, log_file=str(log_file),
            component_levels={'hyperroute.algorithms': 'WARNING'}
        )
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            setup_logging(settings)
            logging.getLogger("hyperroute.test").info("hello")
            for handler in root.handlers:
                handler.flush()
            assert "hello" in log_file.read_text()
            assert logging.getLogger('hyperroute.algorithms').level == logging.WARNING
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            logging.getLogger('hyperroute.algorithms').setLevel(logging.NOTSET)


class TestGlobalConfig:
    """Process-wide configuration manager"""

    def test_initialize_replaces_global(self, tmp_path):
        from hyperroute import get_config, initialize_config

        path = tmp_path / "hyperroute.json"
        path.write_text(json.dumps({'routing': {'ripping_cost': 42.0}}))

        manager = initialize_config(path)
        assert get_config() is manager
        assert get_config().settings.routing.ripping_cost == 42.0


def test_get_logger_returns_named_logger():
    from hyperroute.shared.utils import get_logger
    assert get_logger("hyperroute.solver").name == "hyperroute.solver"
