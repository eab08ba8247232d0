#!/usr/bin/env python3
"""
Config tests: validation of numeric/level settings and secret-free debug output.
"""

import os
import sys
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from backend.app.config import Config


class TestConfigValidate(unittest.TestCase):

    def test_bad_port_is_rejected(self):
        for port in ["abc", "0", "70000"]:
            with patch.object(Config, "PORT", port):
                with self.assertRaisesRegex(ValueError, "PORT"):
                    Config.validate()

    def test_bad_timeout_is_rejected(self):
        for timeout in ["soon", "0", "-5"]:
            with patch.object(Config, "LLM_TIMEOUT_SECONDS", timeout):
                with self.assertRaisesRegex(ValueError, "LLM_TIMEOUT_SECONDS"):
                    Config.validate()

    def test_bad_log_level_is_rejected(self):
        with patch.object(Config, "LOG_LEVEL", "LOUD"):
            with self.assertRaisesRegex(ValueError, "LOG_LEVEL"):
                Config.validate()

    def test_every_bad_setting_is_listed(self):
        with patch.object(Config, "PORT", "x"), patch.object(Config, "LLM_TIMEOUT_SECONDS", "y"):
            with self.assertRaises(ValueError) as ctx:
                Config.validate()
        self.assertIn("PORT", str(ctx.exception))
        self.assertIn("LLM_TIMEOUT_SECONDS", str(ctx.exception))

    def test_valid_settings_pass(self):
        with patch.object(Config, "PORT", "8080"), \
                patch.object(Config, "LLM_TIMEOUT_SECONDS", "2.5"), \
                patch.object(Config, "LOG_LEVEL", "INFO"):
            self.assertTrue(Config.validate())
            self.assertEqual(Config.port(), 8080)
            self.assertEqual(Config.timeout_seconds(), 2.5)


class TestConfigDebugPrint(unittest.TestCase):

    def test_database_password_is_hidden(self):
        with patch.object(Config, "DATABASE_URL", "postgresql://voter:s3cretPW@db/voter"), \
                patch.object(Config, "GROQ_API_KEY", "gsk_live_key"), \
                self.assertLogs("voterbot", level="INFO") as logs:
            Config.debug_print()

        output = "\n".join(logs.output)
        self.assertNotIn("s3cretPW", output)
        self.assertNotIn("gsk_live_key", output)
        self.assertIn("postgresql://voter:***@db/voter", output)


if __name__ == '__main__':
    unittest.main()
