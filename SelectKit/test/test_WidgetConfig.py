import os
import tempfile
from unittest.mock import patch

from SelectKit.WidgetConfig import WIDGET_CONFIG, WidgetConfig
from SelectKit.model.PersistentFile import PersistentFile
from SelectKit.test.test_utils import config_test


class TestWidgetConfig:
    def test_defaults(self):
        config = WidgetConfig()
        assert config.strict_options
        assert config.no_options_text == "No options available"
        assert config.log_level == "INFO"

    def test_bad_history_falls_back(self):
        assert WidgetConfig(notification_history=0).notification_history == 50

    def test_round_trip_through_disk(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            location = os.path.join(tmpdir, "nested", "WidgetConfig.json")
            with patch.object(WidgetConfig, "WRITE_LOCATION", location):
                WidgetConfig(strict_options=False, log_level="DEBUG").save()
                loaded = WidgetConfig.load()
            assert not loaded.strict_options
            assert loaded.log_level == "DEBUG"

    @config_test
    def test_nothing_written_in_test_mode(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            location = os.path.join(tmpdir, "WidgetConfig.json")
            with patch.object(WidgetConfig, "WRITE_LOCATION", location):
                WIDGET_CONFIG.save()
            assert not os.path.exists(location)

    @config_test
    def test_reset(self):
        WIDGET_CONFIG.no_options_text = "Nothing"
        WIDGET_CONFIG.reset()
        assert WIDGET_CONFIG.no_options_text == "No options available"

    def test_test_mode_toggle(self):
        PersistentFile.toggle_test_mode(True)
        assert PersistentFile.TEST_MODE
        PersistentFile.toggle_test_mode(False)
        assert not PersistentFile.TEST_MODE
