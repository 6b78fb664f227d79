"""Tests for Submit/Poll request and response shapes."""

import pytest

from translation_service.errors import ValidationError
from translation_service.languages import SupportedLanguage
from translation_service.messages import (
    AsyncSubmitResponse,
    TaskStatusResponse,
    error_envelope,
    parse_submit_request,
    success_envelope,
)
from translation_service.tasks import TranslationResult, TranslationStatus, TranslationTask


class TestParseSubmitRequest:
    """Tests for parse_submit_request."""

    def test_camel_case_payload(self):
        request = parse_submit_request(
            {
                "content": {"title": "Hello"},
                "sourceLanguage": "en",
                "targetLanguages": ["fr", "de"],
                "async": True,
            }
        )

        assert request.content == {"title": "Hello"}
        assert request.source_language == SupportedLanguage.EN
        assert request.target_languages == [SupportedLanguage.FR, SupportedLanguage.DE]
        assert request.async_mode is True

    def test_defaults(self):
        request = parse_submit_request({"content": {"title": "你好"}}, default_source_language="zh")

        assert request.source_language == SupportedLanguage.ZH
        assert len(request.target_languages) == 9
        assert request.async_mode is False

    def test_snake_case_fallback(self):
        request = parse_submit_request(
            {"content": {"title": "Hello"}, "source_language": "en", "target_languages": ["ja"]}
        )
        assert request.target_languages == [SupportedLanguage.JA]

    def test_empty_fields_dropped(self):
        request = parse_submit_request(
            {"content": {"title": "Hello", "body": ""}, "sourceLanguage": "en", "targetLanguages": ["fr"]}
        )
        assert request.content == {"title": "Hello"}

    @pytest.mark.parametrize(
        "payload",
        [
            ["not", "an", "object"],
            {},
            {"content": "Hello"},
            {"content": {"title": "Hello"}, "sourceLanguage": "xx"},
            {"content": {"title": "Hello"}, "sourceLanguage": "en", "targetLanguages": "fr"},
            {"content": {"title": "Hello"}, "sourceLanguage": "en", "targetLanguages": ["en", "xx"]},
            {"content": {"title": "Hello"}, "sourceLanguage": "en", "async": "yes"},
            {"content": {"title": 5}, "sourceLanguage": "en"},
        ],
    )
    def test_invalid_payloads(self, payload):
        with pytest.raises(ValidationError):
            parse_submit_request(payload)


class TestTaskStatusResponse:
    """Tests for the Poll view."""

    def test_from_task(self):
        task = TranslationTask(
            source_language=SupportedLanguage.EN,
            target_languages=(SupportedLanguage.FR, SupportedLanguage.DE),
            content={"title": "Hello"},
            status=TranslationStatus.TRANSLATING,
            results=(
                TranslationResult(
                    field="title",
                    language=SupportedLanguage.FR,
                    text="[fr] Hello",
                    status=TranslationStatus.COMPLETED,
                    quality_score=66,
                ),
            ),
        )

        status = TaskStatusResponse.from_task(task)
        wire = status.to_wire()

        assert wire["taskId"] == task.id
        assert wire["status"] == "translating"
        assert wire["progress"] == 0.5
        assert wire["results"][0]["qualityScore"] == 66
        assert wire["translations"] == {"title": {"en": "Hello", "fr": "[fr] Hello"}}
        assert wire["targetLanguages"] == ["fr", "de"]
        assert not status.is_terminal

    def test_parses_wire_form(self):
        task = TranslationTask(
            source_language=SupportedLanguage.EN,
            target_languages=(SupportedLanguage.FR,),
            content={"title": "Hello"},
        )
        wire = TaskStatusResponse.from_task(task).to_wire()

        parsed = TaskStatusResponse.model_validate(wire)

        assert parsed.task_id == task.id
        assert parsed.status == TranslationStatus.PENDING


class TestEnvelopes:
    def test_success_envelope(self):
        envelope = success_envelope(AsyncSubmitResponse(task_id="trans_1_abc"))
        assert envelope == {
            "success": True,
            "data": {
                "taskId": "trans_1_abc",
                "status": "pending",
                "message": "Translation task created and queued for background processing",
            },
        }

    def test_error_envelope(self):
        assert error_envelope("TASK_NOT_FOUND", "missing") == {
            "success": False,
            "error": {"code": "TASK_NOT_FOUND", "message": "missing", "details": None},
        }
