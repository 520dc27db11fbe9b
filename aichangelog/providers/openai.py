"""OpenAI adapter built on the Responses API."""

import json
import logging
from typing import Any, Iterable, Mapping, Optional

import openai
from openai import OpenAI

from .base import ChangelogProvider
from .breaking import DEFAULT_BREAKING_RULES, BreakingRule, is_breaking
from .errors import AuthenticationError, NetworkError, UpstreamError
from .models import ChangelogRequest


logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TIMEOUT_SECONDS = 60.0

_INSTRUCTIONS_TEMPLATE = """
You generate concise release notes from git commits.
Output ONLY a Markdown section for Keep a Changelog format:
## [{version}] - {date}

Group by: Added, Changed, Fixed, Deprecated, Removed, Security, Performance, Docs, Build/CI.
Only include groups that have entries; omit empty groups entirely.
Infer groups from Conventional Commits when possible (feat, fix, perf, docs, chore, refactor, build, ci).
If nothing fits, put under Changed.
Commits flagged with "breaking": true introduce BREAKING CHANGES (footer or bang).
If any commit is breaking, add a bold **BREAKING** subsection at the top, before the groups, with bullet points.
Use short, user-facing phrasing. Prefer imperative verb phrases (e.g., "Add X", "Fix Y").
De-duplicate similar commits; collapse tiny refactors unless user-facing.
Do NOT include commit hashes, authors, or PR numbers.
Do NOT add any text outside the section.
""".strip()


class OpenAIProvider(ChangelogProvider):
    """Send the whole request as one JSON document to the Responses API."""

    display_name = "OpenAI"

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL,
                 timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 breaking_rules: Iterable[BreakingRule] = DEFAULT_BREAKING_RULES,
                 client: Optional[OpenAI] = None):
        super().__init__(api_key)
        self.model = model
        self.timeout = timeout
        self.breaking_rules = tuple(breaking_rules)
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            # SDK retries are disabled so one call means one request.
            self._client = OpenAI(api_key=self._require_api_key(), timeout=self.timeout, max_retries=0)
        return self._client

    def build_instructions(self, request: ChangelogRequest) -> str:
        return _INSTRUCTIONS_TEMPLATE.format(version=request.version, date=request.date)

    def build_input(self, request: ChangelogRequest) -> str:
        """Serialize the request, tagging each commit with its breaking flag."""
        payload = request.to_payload()
        for item, entry in zip(payload['commits'], request.commits):
            item['breaking'] = is_breaking(entry, self.breaking_rules)
        return json.dumps(payload, ensure_ascii=False)

    def generate_changelog(self, request: ChangelogRequest) -> str:
        self._require_api_key()
        instructions = self.build_instructions(request)
        request_input = self.build_input(request)

        logger.debug(f"Requesting changelog for {request.version} from OpenAI model {self.model} "
                     f"({len(request.commits)} commits)")
        try:
            response = self.client.responses.create(
                model=self.model,
                instructions=instructions,
                input=request_input,
            )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            raise AuthenticationError(self.display_name, _error_message(e)) from e
        except openai.APIConnectionError as e:
            raise NetworkError(self.display_name, str(e)) from e
        except openai.APIStatusError as e:
            raise UpstreamError(self.display_name, _error_message(e), e.status_code) from e
        except openai.OpenAIError as e:
            raise UpstreamError(self.display_name, str(e) or "API error") from e

        try:
            generated = response.output_text
        except (AttributeError, TypeError) as e:
            raise UpstreamError(self.display_name, f"malformed response: {e}") from e

        return self._clean_output(generated)


def _error_message(error: openai.APIStatusError) -> str:
    """Pull the backend's own error text out of an SDK status error."""
    body: Any = error.body
    if isinstance(body, Mapping):
        nested = body.get('error')
        if isinstance(nested, Mapping) and nested.get('message'):
            return str(nested['message'])
        if body.get('message'):
            return str(body['message'])
    return error.message or "API error"
