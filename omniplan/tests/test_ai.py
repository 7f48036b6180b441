from types import SimpleNamespace
import json
import unittest

import httpx

from omniplan.ai import (
    AIProvider,
    AIProviderError,
    ScheduleItem,
    create_provider,
    generate_schedule,
    predict_main_event,
)
from omniplan.ai.anthropic_provider import AnthropicProvider
from omniplan.ai.gemini_provider import GeminiProvider
from omniplan.ai.openai_provider import OpenAIProvider
from omniplan.ai.parsing import clean_focus, parse_schedule
from omniplan.utilities.constants import AI_EMPTY_FOCUS, AI_ERROR_FOCUS, AI_NOT_CONFIGURED_FOCUS


class BrokenProvider(AIProvider):
    id = "broken"

    def predict_daily_focus(self, past_themes, todo_texts):
        raise AIProviderError("401 Unauthorized")

    def generate_schedule(self, todo_text):
        raise AIProviderError("401 Unauthorized")


class TestParsing(unittest.TestCase):

    def test_clean_focus(self):
        self.assertEqual(clean_focus('"Ship the Q1 roadmap"\nBecause...'), "Ship the Q1 roadmap")
        self.assertEqual(clean_focus("   "), AI_EMPTY_FOCUS)
        self.assertEqual(clean_focus(None), AI_EMPTY_FOCUS)
        self.assertEqual(len(clean_focus("x" * 200)), 60)

    def test_parse_schedule_with_fences_and_prose(self):
        reply = 'Here you go:\n```json\n[{"title": "Email", "start": 9, "duration": 0.5},]\n```'
        self.assertEqual(parse_schedule(reply), [ScheduleItem("Email", 9, 0.5)])

    def test_parse_schedule_skips_bad_items(self):
        reply = json.dumps([
            {"title": "Deep work", "start": 9.5, "duration": 2},
            {"title": "", "start": 11, "duration": 1},
            {"title": "Lunch", "start": "noon", "duration": 1},
            "stray",
        ])
        self.assertEqual(parse_schedule(reply), [ScheduleItem("Deep work", 9.5, 2)])

    def test_parse_schedule_without_array(self):
        with self.assertRaises(AIProviderError):
            parse_schedule("I cannot help with that.")


class TestFacade(unittest.TestCase):

    def test_no_provider_sentinels(self):
        self.assertEqual(predict_main_event(None, [], ["Write"]), AI_NOT_CONFIGURED_FOCUS)
        self.assertEqual(generate_schedule(None, "Write"), [])

    def test_failing_provider_sentinels(self):
        with self.assertLogs("omniplan.ai", level="ERROR"):
            self.assertEqual(predict_main_event(BrokenProvider(), [], ["Write"]), AI_ERROR_FOCUS)
        with self.assertLogs("omniplan.ai", level="ERROR"):
            self.assertEqual(generate_schedule(BrokenProvider(), "Write"), [])

    def test_create_provider(self):
        self.assertIsNone(create_provider("none", "key"))
        self.assertIsNone(create_provider("openai", ""))
        self.assertIsNone(create_provider("mystery", "key"))
        self.assertIsInstance(create_provider("anthropic", "key"), AnthropicProvider)
        self.assertIsInstance(create_provider("gemini", "key"), GeminiProvider)


class TestProviders(unittest.TestCase):

    def test_anthropic_request_and_reply(self):
        seen = {}

        def handler(request):
            seen["headers"] = request.headers
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"content": [{"type": "text", "text": "Close the funding round"}]})

        provider = AnthropicProvider("sk-ant-test", client=httpx.Client(transport=httpx.MockTransport(handler)))
        self.assertEqual(provider.predict_daily_focus(["Sales"], ["Call investors"]), "Close the funding round")
        self.assertEqual(seen["headers"]["x-api-key"], "sk-ant-test")
        self.assertIn("Call investors", seen["body"]["messages"][0]["content"])

    def test_anthropic_http_error(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(401, text="bad key")))
        provider = AnthropicProvider("wrong", client=client)
        with self.assertRaises(AIProviderError):
            provider.predict_daily_focus([], [])
        self.assertEqual(predict_main_event(provider, [], []), AI_ERROR_FOCUS)

    def test_gemini_schedule(self):
        reply = '[{"title": "Plan", "start": 9, "duration": 1}]'

        def handler(request):
            self.assertEqual(request.headers["x-goog-api-key"], "AIza-test")
            return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": reply}]}}]})

        provider = GeminiProvider("AIza-test", client=httpx.Client(transport=httpx.MockTransport(handler)))
        self.assertEqual(provider.generate_schedule("Plan"), [ScheduleItem("Plan", 9, 1)])

    def test_openai_uses_responses_api(self):
        calls = []

        def create(**kwargs):
            calls.append(kwargs)
            return SimpleNamespace(output_text="  Hire the first engineer  ")

        client = SimpleNamespace(responses=SimpleNamespace(create=create))
        provider = OpenAIProvider("sk-test", client=client)
        self.assertEqual(provider.predict_daily_focus([], ["Interviews"]), "Hire the first engineer")
        self.assertEqual(calls[0]["model"], provider.model)


if __name__ == '__main__':
    unittest.main()
