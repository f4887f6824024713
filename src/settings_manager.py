"""
meadbrain app
settings_manager.py
"""

import json
import os
import threading
import copy

SETTINGS_FILE = "meadbrain_settings.json"

DEFAULT_SETTINGS = {
    "system_settings": {
        "units": "imperial"
    },
    # Form values restored on the next start
    "last_inputs": {
        "volume": 5.0,
        "abv": 14,
        "sweetness": "Semi-Sweet",
        "turbo": False
    }
}

class SettingsManager:
    def __init__(self, base_dir):
        self.base_dir = base_dir
        self.data_dir = os.path.join(base_dir, 'meadbrain-data')
        self.settings_file = os.path.join(self.data_dir, SETTINGS_FILE)
        self._data_lock = threading.RLock()

        self.settings = {}

        self._ensure_data_dir()
        self._load_settings()

    def _ensure_data_dir(self):
        try:
            os.makedirs(self.data_dir, exist_ok=True)
        except OSError as e:
            print(f"[SettingsManager] Error creating data dir: {e}")

    def _get_default_settings(self):
        return copy.deepcopy(DEFAULT_SETTINGS)

    def _load_settings(self):
        with self._data_lock:
            if not os.path.exists(self.settings_file):
                self.settings = self._get_default_settings()
                self._save_settings()
                return

            try:
                with open(self.settings_file, 'r', encoding='utf-8') as f:
                    self.settings = json.load(f)
                if not isinstance(self.settings, dict):
                    raise ValueError("settings root is not an object")

                # Back-fill sections and keys added since the file was written
                defaults = self._get_default_settings()
                for section, data in defaults.items():
                    if not isinstance(self.settings.get(section), dict):
                        self.settings[section] = data
                    else:
                        for key, val in data.items():
                            if key not in self.settings[section]:
                                self.settings[section][key] = val

            except (OSError, ValueError) as e:
                print(f"[SettingsManager] Error loading settings: {e}. Reverting to defaults.")
                self.settings = self._get_default_settings()
                self._save_settings()

    def _save_settings(self):
        with self._data_lock:
            try:
                with open(self.settings_file, 'w', encoding='utf-8') as f:
                    json.dump(self.settings, f, indent=4)
            except OSError as e:
                print(f"[SettingsManager] Error saving settings: {e}")

    # --- GETTERS / SETTERS ---

    def get(self, section, key, default=None):
        with self._data_lock:
            return self.settings.get(section, {}).get(key, default)

    def get_section(self, section):
        """Returns a copy of the entire dictionary for a section."""
        with self._data_lock:
            return copy.deepcopy(self.settings.get(section, {}))

    def set(self, section, key, value):
        with self._data_lock:
            if section not in self.settings:
                self.settings[section] = {}
            self.settings[section][key] = value
            self._save_settings()

    def get_system_setting(self, key, default=None):
        return self.get("system_settings", key, default)

    def set_system_setting(self, key, value):
        self.set("system_settings", key, value)

    def is_metric(self):
        return self.get_system_setting("units", "imperial") == "metric"

    # --- FORM SESSION ---

    def get_last_inputs(self):
        inputs = self._get_default_settings()["last_inputs"]
        inputs.update(self.get_section("last_inputs"))
        return inputs

    def save_last_inputs(self, calc_input):
        """Stores a validated CalculationInput as the next session's form values."""
        data = calc_input.to_dict()
        with self._data_lock:
            self.settings["last_inputs"] = {
                "volume": data["volume"],
                "abv": data["abv"],
                "sweetness": data["sweetness"],
                "turbo": data["turbo"]
            }
            # Saves both sections in one write
            self.set_system_setting(
                "units", "metric" if data["units"] == "Metric" else "imperial"
            )
        print(f"[SettingsManager] Saved last inputs: {data}")
