"""Unit tests for the Config class."""

import os
import unittest
from unittest.mock import patch

from chat_relay.conf.config import Config


class TestConfig(unittest.TestCase):
    """Test cases for Config defaults."""

    def test_cannot_instantiate(self) -> None:
        with self.assertRaises(TypeError):
            Config()

    def test_default_database_url_is_relative(self) -> None:
        """Without DATABASE_URL the SQLite file lives in the working directory."""
        if "DATABASE_URL" in os.environ:
            self.skipTest("DATABASE_URL set in the environment")
        self.assertEqual(Config.DATABASE_URL, "sqlite:///chat_relay.db")

    def test_sampling_defaults(self) -> None:
        self.assertEqual(Config.LLM_TEMPERATURE, 0.1)
        self.assertEqual(Config.LLM_MAX_TOKENS, 256)
        self.assertEqual(Config.CONTEXT_WINDOW_SIZE, 10)

    def test_class_attributes_can_be_overridden(self) -> None:
        with patch.object(Config, "LLM_SERVICE", "openai"):
            self.assertEqual(Config.LLM_SERVICE, "openai")


if __name__ == "__main__":
    unittest.main()
