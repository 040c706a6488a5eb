import asyncio
import json

import httpx
import pytest

from conftest import FailingJudge
from undercover.errors import JudgeUnavailableError
from undercover.service.judge import (
    ExactMatchJudge,
    FallbackGuessJudge,
    RemoteGuessJudge,
    build_guess_judge,
    exact_match,
)


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def remote_judge(handler, **kwargs):
    return RemoteGuessJudge(
        api_key="sk-test",
        base_url="https://judge.test/v1/",
        model="judge-model",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


@pytest.mark.parametrize("secret,guess,expected", [
    ("Kopi", "Kopi", True),
    ("Kopi", "  kOpI ", True),
    ("Kopi", "KOPI\n", True),
    ("Kopi", "Teh", False),
    ("Kopi", "Kopi susu", False),
])
def test_exact_match(secret, guess, expected):
    assert exact_match(secret, guess) is expected
    assert asyncio.run(ExactMatchJudge().judge(secret, guess)) is expected


def test_remote_judge_sends_prompt_and_reads_verdict():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=completion('{"is_correct": true}'))

    verdict = asyncio.run(remote_judge(handler).judge("Kopi", "espresso"))

    assert verdict is True
    assert seen["url"] == "https://judge.test/v1/chat/completions"
    assert seen["auth"] == "Bearer sk-test"
    assert seen["body"]["model"] == "judge-model"
    assert seen["body"]["response_format"] == {"type": "json_object"}
    prompt = seen["body"]["messages"][0]["content"]
    assert '"Kopi"' in prompt
    assert '"espresso"' in prompt


def test_remote_judge_negative_verdict():
    def handler(request):
        return httpx.Response(200, json=completion('{"is_correct": false}'))

    assert asyncio.run(remote_judge(handler).judge("Kopi", "Teh")) is False


@pytest.mark.parametrize("response", [
    httpx.Response(500, text="boom"),
    httpx.Response(401, json={"error": "bad key"}),
    httpx.Response(200, text="not json"),
    httpx.Response(200, json={"choices": []}),
    httpx.Response(200, json=completion("yes")),
    httpx.Response(200, json=completion('{"is_correct": "yes"}')),
    httpx.Response(200, json=completion('{"verdict": true}')),
])
def test_remote_judge_bad_answers_are_unavailable(response):
    def handler(request):
        return response

    with pytest.raises(JudgeUnavailableError):
        asyncio.run(remote_judge(handler).judge("Kopi", "Kopi"))


def test_remote_judge_connection_error_is_unavailable():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(JudgeUnavailableError):
        asyncio.run(remote_judge(handler).judge("Kopi", "Kopi"))


def test_fallback_uses_exact_match_when_remote_fails():
    primary = FailingJudge(JudgeUnavailableError("offline"))
    judge = FallbackGuessJudge(primary)

    assert asyncio.run(judge.judge("Kopi", "  kOpI ")) is True
    assert asyncio.run(judge.judge("Kopi", "Teh")) is False
    assert primary.calls == 2


def test_fallback_prefers_remote_verdict():
    def handler(request):
        return httpx.Response(200, json=completion('{"is_correct": true}'))

    judge = FallbackGuessJudge(remote_judge(handler))
    assert asyncio.run(judge.judge("Kopi", "coffee")) is True


def test_fallback_does_not_hide_other_errors():
    judge = FallbackGuessJudge(FailingJudge(RuntimeError("bug")))
    with pytest.raises(RuntimeError):
        asyncio.run(judge.judge("Kopi", "Kopi"))


def test_build_guess_judge_without_key_is_offline():
    judge = build_guess_judge({"api_key": ""})
    assert isinstance(judge, ExactMatchJudge)


def test_build_guess_judge_with_key_wraps_remote():
    judge = build_guess_judge({
        "api_key": "sk-test",
        "base_url": "https://judge.test/v1",
        "model": "judge-model",
        "request_timeout": 2,
    })

    assert isinstance(judge, FallbackGuessJudge)
    assert isinstance(judge.primary, RemoteGuessJudge)
    assert isinstance(judge.fallback, ExactMatchJudge)
    assert judge.primary.base_url == "https://judge.test/v1"
    assert judge.primary.timeout == 2


def test_fallback_covers_malformed_judge_url():
    remote = RemoteGuessJudge(api_key="sk-test", base_url="https://judge.test:notaport/v1")

    with pytest.raises(JudgeUnavailableError):
        asyncio.run(remote.judge("Kopi", "Kopi"))
    assert asyncio.run(FallbackGuessJudge(remote).judge("Kopi", " kopi ")) is True
