"""
Unit tests for the command line entry point.
"""

import json
import logging
import os
import sys
import tempfile
import unittest

import pandas as pd

# Import from src directory
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))
from rocketeer.analysis import CSV_COLUMNS
from rocketeer.config import load_config
from rocketeer.main import main


class TestMain(unittest.TestCase):
    """Test cases for running the tool from the command line."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.config_path = self._path("config.json")
        self.base_args = ["--config", self.config_path, "--log-file", self._path("rocketeer.log")]

    def tearDown(self):
        logger = logging.getLogger("rocketeer")
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        self.tmpdir.cleanup()

    def _path(self, name):
        return os.path.join(self.tmpdir.name, name)

    def test_writes_csv(self):
        csv_path = self._path("out/results.csv")
        status = main(self.base_args + ["--steps", "50", "--csv", csv_path])
        self.assertEqual(status, 0)

        df = pd.read_csv(csv_path)
        self.assertEqual(list(df.columns), list(CSV_COLUMNS))
        self.assertEqual(len(df), 50)
        self.assertEqual(df["Po"].iloc[0], 101_000.0)

    def test_writes_plot(self):
        plot_path = self._path("pressure.png")
        status = main(self.base_args + ["--steps", "20", "--plot", plot_path])
        self.assertEqual(status, 0)
        self.assertGreater(os.path.getsize(plot_path), 0)

    def test_motor_file_and_save_inputs(self):
        motor_path = self._path("motor.json")
        with open(motor_path, "w") as f:
            json.dump({"propellant": "KNDX", "number_of_grains": 3, "inhibited_surfaces": ["outer"]}, f)

        status = main(self.base_args + [motor_path, "--steps", "2", "--save-inputs"])
        self.assertEqual(status, 0)

        saved = load_config(self.config_path)
        self.assertEqual(saved["motor"]["propellant"], "KNDX")
        self.assertEqual(saved["motor"]["number_of_grains"], 3)
        self.assertEqual(saved["motor"]["inhibited_surfaces"], ["outer"])
        self.assertEqual(saved["steps"], 2)

    def test_invalid_motor(self):
        motor_path = self._path("motor.json")
        with open(motor_path, "w") as f:
            json.dump({"throat_diameter": -1}, f)
        self.assertEqual(main(self.base_args + [motor_path]), 2)

    def test_motor_file_with_malformed_values(self):
        for motor in ({"grain_length": "sixty-five"},
                      {"inhibited_surfaces": "outer"},
                      {"propellant": None}):
            with self.subTest(motor=motor):
                motor_path = self._path("motor.json")
                with open(motor_path, "w") as f:
                    json.dump(motor, f)
                self.assertEqual(main(self.base_args + [motor_path, "--steps", "2"]), 2)

    def test_motor_file_with_quoted_numbers(self):
        motor_path = self._path("motor.json")
        with open(motor_path, "w") as f:
            json.dump({"grain_length": "65", "number_of_grains": "4"}, f)
        self.assertEqual(main(self.base_args + [motor_path, "--steps", "2"]), 0)

    def test_motor_file_not_an_object(self):
        motor_path = self._path("motor.json")
        with open(motor_path, "w") as f:
            json.dump([1, 2, 3], f)
        self.assertEqual(main(self.base_args + [motor_path]), 2)

    def test_missing_motor_file(self):
        self.assertEqual(main(self.base_args + [self._path("nope.json")]), 2)

    def test_stop_condition(self):
        csv_path = self._path("burnout.csv")
        status = main(self.base_args + ["--stop", "burnout", "--csv", csv_path])
        self.assertEqual(status, 0)
        df = pd.read_csv(csv_path)
        self.assertLess(len(df), 834)
        self.assertLessEqual(df["tweb"].iloc[-1], 0.0)


if __name__ == '__main__':
    unittest.main()
