import unittest

from aichangelog.providers import (
    AuthenticationError,
    EmptyResponseError,
    NetworkError,
    OpenAIProvider,
    ProviderError,
    UpstreamError,
    XAIProvider,
    get_provider,
)


class ProviderRegistryTests(unittest.TestCase):
    def test_selects_adapter_by_name(self) -> None:
        self.assertIsInstance(get_provider("openai", "sk-test"), OpenAIProvider)
        self.assertIsInstance(get_provider(" XAI ", "xai-test"), XAIProvider)

    def test_passes_options_to_adapter(self) -> None:
        provider = get_provider("xai", "xai-test", model="grok-3-mini", base_url="https://example.com/v1", timeout=5)

        self.assertEqual(provider.model, "grok-3-mini")
        self.assertEqual(provider.base_url, "https://example.com/v1")
        self.assertEqual(provider.timeout, 5)

    def test_unknown_provider_lists_available_ones(self) -> None:
        with self.assertRaises(ValueError) as raised_error:
            get_provider("anthropic", "key")

        self.assertIn("Available providers: openai, xai", str(raised_error.exception))

    def test_construction_does_not_validate_credential(self) -> None:
        provider = get_provider("openai", "")

        self.assertEqual(provider.api_key, "")

    def test_repr_hides_credential(self) -> None:
        self.assertNotIn("sk-secret", repr(get_provider("openai", "sk-secret")))


class ProviderErrorTests(unittest.TestCase):
    def test_error_kinds_share_base_and_prefix(self) -> None:
        for error_cls in (AuthenticationError, NetworkError, UpstreamError, EmptyResponseError):
            with self.subTest(error_cls=error_cls.__name__):
                error = error_cls("XAI", "something broke")

                self.assertIsInstance(error, ProviderError)
                self.assertEqual(str(error), "XAI API error: something broke")
                self.assertEqual(error.provider, "XAI")


if __name__ == "__main__":
    unittest.main()
