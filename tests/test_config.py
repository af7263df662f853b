"""
Unit tests for the saved-inputs configuration file.
"""

import json
import os
import sys
import tempfile
import unittest

# Import from src directory
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))
from rocketeer.config import DEFAULT_CONFIG, load_config, save_config
from rocketeer.propulsion.motor import MotorConfiguration


class TestConfig(unittest.TestCase):
    """Test cases for loading and saving the configuration."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "config.json")

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_creates_default_file(self):
        config = load_config(self.path)
        self.assertEqual(config, DEFAULT_CONFIG)
        self.assertTrue(os.path.exists(self.path))
        with open(self.path) as f:
            self.assertEqual(json.load(f), DEFAULT_CONFIG)

    def test_default_motor_is_valid(self):
        motor = MotorConfiguration.from_dict(load_config(self.path)["motor"])
        self.assertEqual(motor.grain.total_length, 260.0)

    def test_returned_config_is_a_copy(self):
        config = load_config(self.path)
        config["motor"]["grain_length"] = 1.0
        self.assertEqual(DEFAULT_CONFIG["motor"]["grain_length"], 65.0)

    def test_save_and_load(self):
        config = load_config(self.path)
        config["motor"]["propellant"] = "KNDX"
        config["steps"] = 100
        self.assertTrue(save_config(config, self.path))

        loaded = load_config(self.path)
        self.assertEqual(loaded["motor"]["propellant"], "KNDX")
        self.assertEqual(loaded["steps"], 100)
        self.assertEqual(loaded["simulation_step"], 0.0294)

    def test_missing_keys_filled_from_defaults(self):
        with open(self.path, "w") as f:
            json.dump({"motor": {"number_of_grains": 2}}, f)
        config = load_config(self.path)
        self.assertEqual(config["motor"]["number_of_grains"], 2)
        self.assertEqual(config["motor"]["grain_length"], 65.0)
        self.assertEqual(config["steps"], 834)

    def test_corrupt_file_falls_back_to_defaults(self):
        with open(self.path, "w") as f:
            f.write("{not json")
        with self.assertLogs("rocketeer.config", level="WARNING"):
            config = load_config(self.path)
        self.assertEqual(config, DEFAULT_CONFIG)

    def test_malformed_file_is_not_partially_merged(self):
        for stored in ({"steps": 5, "motor": ["KNDX"]}, {"steps": 5, "motor": "KNDX"}, [1, 2]):
            with self.subTest(stored=stored):
                with open(self.path, "w") as f:
                    json.dump(stored, f)
                with self.assertLogs("rocketeer.config", level="WARNING"):
                    config = load_config(self.path)
                self.assertEqual(config, DEFAULT_CONFIG)

    def test_save_failure(self):
        missing_dir = os.path.join(self.tmpdir.name, "missing", "config.json")
        with self.assertLogs("rocketeer.config", level="ERROR"):
            self.assertFalse(save_config(DEFAULT_CONFIG, missing_dir))


if __name__ == '__main__':
    unittest.main()
