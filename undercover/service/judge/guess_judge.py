"""
Guess Judge - decides whether Mr. White's guess names the common word

The remote judge asks an OpenAI-compatible chat model for a semantic
verdict. When it cannot answer, FallbackGuessJudge settles the guess with
case-insensitive, whitespace-trimmed string equality.
"""
import json
from typing import Any, Dict, Optional

import httpx

from undercover.config import JUDGE_CONFIG
from undercover.errors import JudgeUnavailableError


JUDGE_PROMPT = (
    'Context: the party game "Undercover". The secret common word is "{secret}". '
    'Mr. White guessed "{guess}".\n'
    "Task: decide whether the guess is effectively correct (exact match, a very "
    "close synonym or variant, or the same concept).\n"
    'Reply with JSON only: {{"is_correct": true}} or {{"is_correct": false}}'
)


def exact_match(secret_word: str, guess: str) -> bool:
    return secret_word.strip().lower() == guess.strip().lower()


class ExactMatchJudge:
    """Deterministic judge used offline and as the fallback"""

    async def judge(self, secret_word: str, guess: str) -> bool:
        return exact_match(secret_word, guess)


class RemoteGuessJudge:
    """Semantic judge backed by a chat-completions endpoint"""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = (base_url or JUDGE_CONFIG["base_url"]).rstrip("/")
        self.model = model or JUDGE_CONFIG["model"]
        self.timeout = timeout if timeout is not None else JUDGE_CONFIG["request_timeout"]
        self.transport = transport

    def _build_payload(self, secret_word: str, guess: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "user", "content": JUDGE_PROMPT.format(secret=secret_word, guess=guess)}
            ],
            "response_format": {"type": "json_object"},
            "temperature": 0,
        }

    async def judge(self, secret_word: str, guess: str) -> bool:
        """
        Ask the remote model for a verdict.

        Raises:
            JudgeUnavailableError: transport failure, non-2xx status, or an
                answer that is not {"is_correct": <bool>}
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json=self._build_payload(secret_word, guess),
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise JudgeUnavailableError(f"Judge request failed: {e}") from e
        except ValueError as e:
            raise JudgeUnavailableError(f"Judge returned invalid JSON: {e}") from e

        return self._parse_verdict(data)

    @staticmethod
    def _parse_verdict(data: Dict[str, Any]) -> bool:
        try:
            content = data["choices"][0]["message"]["content"]
            verdict = json.loads(content)["is_correct"]
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise JudgeUnavailableError(f"Unexpected judge response: {e}") from e

        if not isinstance(verdict, bool):
            raise JudgeUnavailableError(f"Judge verdict is not a boolean: {verdict!r}")
        return verdict


class FallbackGuessJudge:
    """Remote verdict when available, exact match otherwise"""

    def __init__(self, primary, fallback=None):
        self.primary = primary
        self.fallback = fallback or ExactMatchJudge()

    async def judge(self, secret_word: str, guess: str) -> bool:
        try:
            return await self.primary.judge(secret_word, guess)
        except JudgeUnavailableError as e:
            print(f"[Judge] ⚠ Remote judge unavailable, using exact match: {e}")
            return await self.fallback.judge(secret_word, guess)


def build_guess_judge(config: Optional[Dict[str, Any]] = None):
    """Remote judge with fallback if an API key is configured, else exact match"""
    config = config or JUDGE_CONFIG
    if not config.get("api_key"):
        return ExactMatchJudge()
    remote = RemoteGuessJudge(
        api_key=config["api_key"],
        base_url=config.get("base_url"),
        model=config.get("model"),
        timeout=config.get("request_timeout"),
    )
    return FallbackGuessJudge(remote)
