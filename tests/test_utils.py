"""
Unit tests for the export and plotting helpers.
"""

import os
import sys
import tempfile
import unittest
from dataclasses import fields

import pandas as pd

# Import from src directory
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))
from rocketeer.analysis import CSV_COLUMNS, run_simulation
from rocketeer.config import DEFAULT_CONFIG, default_config
from rocketeer.propulsion.environment import DEFAULT_ENVIRONMENT
from rocketeer.utils import create_graphs, create_pressure_graph, export_csv, summary_frame
from tests.helpers import reference_motor


class TestExport(unittest.TestCase):
    """Test cases for CSV and summary export."""

    @classmethod
    def setUpClass(cls):
        cls.result = run_simulation(reference_motor(), steps=20)

    def test_export_csv_writes_header(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "nested", "run.csv")
            self.assertTrue(export_csv(self.result.to_dataframe(), path))
            df = pd.read_csv(path)
        self.assertEqual(list(df.columns), list(CSV_COLUMNS))
        self.assertEqual(len(df), 20)

    def test_export_csv_reports_failure(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            # A directory cannot be opened as a file
            with self.assertLogs("rocketeer.utils.export", level="ERROR"):
                self.assertFalse(export_csv(self.result.to_dataframe(), tmpdir))

    def test_summary_frame(self):
        summary = self.result.summary()
        frame = summary_frame(summary)
        self.assertEqual(list(frame.columns), ["Property", "Value"])
        self.assertEqual(list(frame["Property"]), list(summary))
        peak = frame.loc[frame["Property"] == "peak_pressure", "Value"].iloc[0]
        self.assertEqual(peak, summary["peak_pressure"])


class TestPlots(unittest.TestCase):
    """Test cases for chart creation."""

    def test_create_graphs(self):
        df = run_simulation(reference_motor(), steps=20).to_dataframe()
        figs = create_graphs(df)
        self.assertEqual(set(figs), {"Pressure", "Kn"})
        # Pressure chart carries a second axis for the mass flows
        self.assertEqual(len(figs["Pressure"].axes), 2)

    def test_empty_table(self):
        df = pd.DataFrame(columns=list(CSV_COLUMNS))
        self.assertEqual(create_graphs(df), {})
        fig = create_pressure_graph(df)
        self.assertEqual(len(fig.axes), 1)


class TestDefaults(unittest.TestCase):
    """Test cases for default values and overrides."""

    def test_default_config_is_independent(self):
        config = default_config()
        config["motor"]["inhibited_surfaces"].append("outer")
        self.assertEqual(DEFAULT_CONFIG["motor"]["inhibited_surfaces"], [])

    def test_environment_overrides(self):
        environment = DEFAULT_ENVIRONMENT.with_overrides(erosive_velocity_coefficient=0.2)
        self.assertTrue(environment.erosive_burning_enabled)
        self.assertFalse(DEFAULT_ENVIRONMENT.erosive_burning_enabled)
        self.assertEqual(environment.ambient_pressure, DEFAULT_ENVIRONMENT.ambient_pressure)

    def test_environment_to_dict(self):
        data = DEFAULT_ENVIRONMENT.to_dict()
        self.assertEqual(set(data), {f.name for f in fields(DEFAULT_ENVIRONMENT)})
        self.assertEqual(data["burst_pressure"], 0.0)
        self.assertEqual(data["erosive_area_ratio_threshold"], 6.0)


if __name__ == "__main__":
    unittest.main()
