import os
import tempfile
import unittest

from click.testing import CliRunner

from netpulse.cli.formatting import format_bytes
from netpulse.cli.main import cli


class FormattingTests(unittest.TestCase):
    def test_format_bytes(self):
        self.assertEqual(format_bytes(0), "0 B")
        self.assertEqual(format_bytes(512), "512 B")
        self.assertEqual(format_bytes(1536), "1.5 KB")
        self.assertEqual(format_bytes(1024 ** 2), "1 MB")
        self.assertEqual(format_bytes(5 * 1024 ** 4), "5120 GB")


class CliTests(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_interfaces(self):
        result = self.runner.invoke(cli, ["interfaces"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("eth0", result.output)
        self.assertIn("bluetooth0", result.output)

    def test_capture_prints_summary(self):
        result = self.runner.invoke(cli, [
            "capture", "--duration", "0.3", "--interval-ms", "20", "--seed", "9",
            "--toggle", "wlan0",
        ])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("CAPTURE SUMMARY", result.output)
        self.assertIn("Threat Alerts:", result.output)

    def test_capture_exports_filtered_view(self):
        with tempfile.TemporaryDirectory() as tmp:
            result = self.runner.invoke(cli, [
                "capture", "-d", "0.2", "--interval-ms", "20", "--protocol", "TCP",
                "--port", "not-a-port", "--export-dir", tmp,
            ])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("Exported", result.output)
            self.assertEqual(len(os.listdir(tmp)), 1)
            self.assertTrue(os.listdir(tmp)[0].startswith("packets_"))

    def test_export_failure_is_reported_not_fatal(self):
        with tempfile.TemporaryDirectory() as tmp:
            missing = os.path.join(tmp, "nope")
            result = self.runner.invoke(cli, [
                "capture", "-d", "0.1", "--interval-ms", "20", "--export-dir", missing,
            ])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Export failed", result.output)

    def test_non_positive_duration_rejected(self):
        for value in ("--duration=0", "--duration=-1"):
            result = self.runner.invoke(cli, ["capture", value])
            self.assertEqual(result.exit_code, 2, result.output)

    def test_invalid_capacity(self):
        result = self.runner.invoke(cli, ["capture", "-d", "0.1", "--capacity", "0"])
        self.assertNotEqual(result.exit_code, 0)


if __name__ == "__main__":
    unittest.main()
