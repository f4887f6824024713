import json
import os

from settings_manager import SettingsManager, DEFAULT_SETTINGS
from mead_math import MeadMath


def test_creates_default_settings_file(tmp_path):
    sm = SettingsManager(str(tmp_path))
    assert os.path.exists(sm.settings_file)
    assert sm.get_last_inputs() == DEFAULT_SETTINGS["last_inputs"]
    assert not sm.is_metric()


def test_save_last_inputs_round_trips(tmp_path):
    sm = SettingsManager(str(tmp_path))
    calc_input = MeadMath.validate_inputs("20", "12", "Sweet", "Liters", True)
    sm.save_last_inputs(calc_input)

    reloaded = SettingsManager(str(tmp_path))
    assert reloaded.is_metric()
    assert reloaded.get_last_inputs() == {
        "volume": 20.0, "abv": 12, "sweetness": "Sweet", "turbo": True
    }


def test_missing_keys_are_backfilled(tmp_path):
    data_dir = tmp_path / "meadbrain-data"
    data_dir.mkdir()
    (data_dir / "meadbrain_settings.json").write_text(
        json.dumps({"system_settings": {"units": "metric"}, "last_inputs": {"volume": 20.0}}),
        encoding="utf-8"
    )

    sm = SettingsManager(str(tmp_path))
    assert sm.is_metric()
    assert sm.get_last_inputs()["volume"] == 20.0
    assert sm.get_last_inputs()["abv"] == 14


def test_corrupt_file_reverts_to_defaults(tmp_path, capsys):
    data_dir = tmp_path / "meadbrain-data"
    data_dir.mkdir()
    (data_dir / "meadbrain_settings.json").write_text("{not json", encoding="utf-8")

    sm = SettingsManager(str(tmp_path))
    assert sm.settings == DEFAULT_SETTINGS
    assert "[SettingsManager] Error loading settings" in capsys.readouterr().out


def test_get_section_returns_copy(tmp_path):
    sm = SettingsManager(str(tmp_path))
    section = sm.get_section("last_inputs")
    section["abv"] = 99
    assert sm.get("last_inputs", "abv") == 14


def test_unit_switch_back_to_imperial_persists(tmp_path):
    sm = SettingsManager(str(tmp_path))
    sm.save_last_inputs(MeadMath.validate_inputs("20", "14", "Dry", "Liters"))
    sm.save_last_inputs(MeadMath.validate_inputs("5", "14", "Dry", "Gallons"))

    reloaded = SettingsManager(str(tmp_path))
    assert not reloaded.is_metric()
    assert reloaded.get_system_setting("units") == "imperial"
    assert reloaded.get_last_inputs()["volume"] == 5.0
