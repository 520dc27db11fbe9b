import json
import os
import tempfile
import unittest
from unittest import mock

from pydantic import ValidationError

from aichangelog.config import Config, create_sample_config, get_config, load_json_config


class GetConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_path = os.path.join(self._tmp.name, "ai-changelog.json")

    def _write(self, data) -> None:
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            config = Config()

        self.assertEqual(config.provider, "xai")
        self.assertEqual(config.openai_model, "gpt-4o-mini")
        self.assertEqual(config.xai_model, "grok-3")
        self.assertEqual(config.xai_base_url, "https://api.x.ai/v1")
        self.assertEqual(config.changelog_file, "CHANGELOG.md")

    def test_environment_overrides_file(self) -> None:
        self._write({"provider": "openai", "openai_api_key": "from-file", "xai_model": "grok-2"})
        env = {"OPENAI_API_KEY": "from-env", "AI_CHANGELOG_XAI_MODEL": "grok-3-mini"}

        with mock.patch.dict(os.environ, env, clear=True):
            config = get_config(self.config_path)

        self.assertEqual(config.provider, "openai")
        self.assertEqual(config.openai_api_key, "from-env")
        self.assertEqual(config.xai_model, "grok-3-mini")

    def test_xai_key_falls_back_to_github_token(self) -> None:
        with mock.patch.dict(os.environ, {"GITHUB_TOKEN": "gh-token"}, clear=True):
            config = get_config(self.config_path)

        self.assertEqual(config.api_key_for("xai"), "gh-token")
        self.assertIsNone(config.api_key_for("openai"))

    def test_xai_key_wins_over_github_token(self) -> None:
        env = {"GITHUB_TOKEN": "gh-token", "XAI_API_KEY": "xai-key"}
        with mock.patch.dict(os.environ, env, clear=True):
            config = get_config(self.config_path)

        self.assertEqual(config.api_key_for("xai"), "xai-key")

    def test_unreadable_file_is_ignored(self) -> None:
        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write("{not json")

        with mock.patch.dict(os.environ, {"AI_CHANGELOG_PROVIDER": "OpenAI"}, clear=True):
            with self.assertLogs("aichangelog.config.settings", level="WARNING"):
                config = get_config(self.config_path)

        self.assertEqual(config.provider, "openai")

    def test_unknown_provider_is_rejected(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValidationError) as raised_error:
                Config(provider="anthropic")

        self.assertIn("Available providers: openai, xai", str(raised_error.exception))

    def test_base_url_is_normalized(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            config = Config(xai_base_url="proxy.example.com/v1/")

        self.assertEqual(config.xai_base_url, "https://proxy.example.com/v1")

    def test_load_json_config_rejects_non_object(self) -> None:
        self._write(["openai"])

        with self.assertRaises(ValueError):
            load_json_config(self.config_path)

    def test_sample_config_round_trips_through_get_config(self) -> None:
        create_sample_config(self.config_path)

        with mock.patch.dict(os.environ, {}, clear=True):
            config = get_config(self.config_path)

        self.assertEqual(config.provider, "xai")
        self.assertEqual(config.xai_api_key, "your-xai-api-key-here")


if __name__ == "__main__":
    unittest.main()
