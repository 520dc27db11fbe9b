"""xAI adapter using the chat completions endpoint."""

import logging
from typing import Any, Dict, Optional

import requests

from .base import ChangelogProvider
from .errors import AuthenticationError, NetworkError, UpstreamError
from .models import ChangelogRequest


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.x.ai/v1"
DEFAULT_MODEL = "grok-3"
DEFAULT_TIMEOUT_SECONDS = 60.0
MAX_TOKENS = 1000
TEMPERATURE = 0.3

SYSTEM_PROMPT = "You are a helpful assistant that generates changelogs in keep-a-changelog format."

_USER_PROMPT_TEMPLATE = """Generate a changelog entry in keep-a-changelog format for version {version} based on this git log:

{git_log}

Format it as:
## [{version}] - {date}

### Added
- List new features

### Changed
- List changes in existing functionality

### Deprecated
- List soon-to-be removed features

### Removed
- List now removed features

### Fixed
- List any bug fixes

### Security
- List security improvements

Only include sections that have actual changes. Be concise and clear.
Output only the changelog section, without commit hashes, author names or PR numbers."""


class XAIProvider(ChangelogProvider):
    """Flatten commits into a plain git log and ask the chat endpoint for a section."""

    display_name = "XAI"

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL,
                 base_url: str = DEFAULT_BASE_URL,
                 timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 session: Optional[requests.Session] = None):
        super().__init__(api_key)
        self.model = model
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session

    @staticmethod
    def format_git_log(request: ChangelogRequest) -> str:
        """Render commits as subject lines, each followed by its body if any."""
        return '\n\n'.join(
            f"{c.subject}\n{c.body}" if c.body else c.subject
            for c in request.commits
        )

    def build_body(self, request: ChangelogRequest) -> Dict[str, Any]:
        prompt = _USER_PROMPT_TEMPLATE.format(
            version=request.version,
            date=request.date,
            git_log=self.format_git_log(request),
        )
        return {
            'model': self.model,
            'messages': [
                {'role': 'system', 'content': SYSTEM_PROMPT},
                {'role': 'user', 'content': prompt},
            ],
            'max_tokens': MAX_TOKENS,
            'temperature': TEMPERATURE,
        }

    def generate_changelog(self, request: ChangelogRequest) -> str:
        api_key = self._require_api_key()
        url = f"{self.base_url}/chat/completions"
        headers = {
            'Authorization': f"Bearer {api_key}",
            'Content-Type': 'application/json',
        }

        logger.debug(f"Requesting changelog for {request.version} from {url} with model {self.model} "
                     f"({len(request.commits)} commits)")
        try:
            # requests.post opens and closes its own session when none is injected
            http = self.session or requests
            response = http.post(url, json=self.build_body(request), headers=headers,
                                 timeout=self.timeout)
        except requests.Timeout as e:
            raise NetworkError(self.display_name, f"request timed out: {e}") from e
        except requests.ConnectionError as e:
            raise NetworkError(self.display_name, f"connection failed: {e}") from e
        except requests.RequestException as e:
            raise NetworkError(self.display_name, str(e) or "request failed") from e

        if not response.ok:
            detail = _error_message(response)
            if response.status_code in (401, 403):
                raise AuthenticationError(self.display_name, detail)
            raise UpstreamError(self.display_name, detail, response.status_code)

        try:
            content = response.json()['choices'][0]['message']['content']
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise UpstreamError(self.display_name, f"malformed response: {e!r}", response.status_code) from e

        if content is not None and not isinstance(content, str):
            raise UpstreamError(self.display_name,
                                f"malformed response: message content is {type(content).__name__}, not text",
                                response.status_code)

        return self._clean_output(content)


def _error_message(response: requests.Response) -> str:
    """Return the backend's error text, or a generic message when there is none."""
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        error = data.get('error')
        if isinstance(error, dict) and error.get('message'):
            return str(error['message'])
        if isinstance(error, str) and error:
            return error
        if data.get('message'):
            return str(data['message'])

    return f"API error ({response.status_code} {response.reason or 'HTTP error'})"
