"""Tests for the student question answering chain with mocked Anthropic."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from anthropic import APIError

from college_planner.chains.answer_student_question import (
    AdvisorUnavailableError,
    AnswerStyle,
    answer_student_question,
    build_prompt,
)


def _mock_settings(api_key="test-key-xxx"):
    settings = MagicMock()
    settings.ANTHROPIC_API_KEY = api_key
    settings.ADVISOR_MODEL = "claude-haiku-4-5-20251001"
    settings.ADVISOR_MAX_TOKENS = 1024
    return settings


def _mock_client(create):
    client = MagicMock()
    client.messages.create = create
    return client


def test_build_prompt_includes_question():
    prompt = build_prompt("  When do I start my essays?  ")
    assert 'When do I start my essays?' in prompt
    assert "college admissions advisor" in prompt

    community = build_prompt("Is ED binding?", AnswerStyle.COMMUNITY)
    assert '"Is ED binding?"' in community


@pytest.mark.asyncio
async def test_missing_api_key_is_unavailable():
    with pytest.raises(AdvisorUnavailableError):
        await answer_student_question("Any tips?", _mock_settings(api_key=None))


@pytest.mark.asyncio
@patch("college_planner.chains.answer_student_question.AsyncAnthropic")
async def test_returns_text_blocks(mock_anthropic):
    create = AsyncMock(return_value=MagicMock(content=[
        MagicMock(type="text", text="Start early. "),
        MagicMock(type="text", text="Revise often."),
    ]))
    mock_anthropic.return_value = _mock_client(create)
    settings = _mock_settings()

    answer = await answer_student_question("Any essay tips?", settings)

    assert answer == "Start early. Revise often."
    mock_anthropic.assert_called_once_with(api_key="test-key-xxx")
    kwargs = create.call_args.kwargs
    assert kwargs["model"] == settings.ADVISOR_MODEL
    assert kwargs["max_tokens"] == 1024
    assert "Any essay tips?" in kwargs["messages"][0]["content"]


@pytest.mark.asyncio
@patch("college_planner.chains.answer_student_question.AsyncAnthropic")
async def test_provider_error_is_unavailable(mock_anthropic):
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    create = AsyncMock(side_effect=APIError("overloaded", request, body=None))
    mock_anthropic.return_value = _mock_client(create)

    with pytest.raises(AdvisorUnavailableError):
        await answer_student_question("Any tips?", _mock_settings())


@pytest.mark.asyncio
@patch("college_planner.chains.answer_student_question.AsyncAnthropic")
async def test_empty_answer_is_unavailable(mock_anthropic):
    create = AsyncMock(return_value=MagicMock(content=[]))
    mock_anthropic.return_value = _mock_client(create)

    with pytest.raises(AdvisorUnavailableError):
        await answer_student_question("Any tips?", _mock_settings())
