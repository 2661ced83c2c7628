import random
import sys
import threading
import unittest
from datetime import datetime
from pathlib import Path

import httpx

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from taskmate.assistant import AssistantSession
from taskmate.llm import CompletionClient, CompletionError, CompletionResponse
from taskmate.prompts import CONFIGURE_KEY_HINT, FALLBACK_REPLIES, WELCOME_MESSAGE


class _StaticBackend:
    def __init__(self, outcome: object) -> None:
        self.outcome = outcome
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> CompletionResponse:
        self.prompts.append(prompt)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return CompletionResponse(content=str(self.outcome))


class _BlockingBackend:
    def __init__(self) -> None:
        self.started = threading.Event()
        self.release = threading.Event()

    def generate(self, prompt: str) -> CompletionResponse:
        self.started.set()
        self.release.wait(timeout=5)
        return CompletionResponse(content="late answer")


class AssistantSessionTests(unittest.TestCase):
    def test_session_starts_with_greeting(self) -> None:
        session = AssistantSession()
        self.assertEqual(len(session.messages), 1)
        first = session.messages.messages[0]
        self.assertEqual(first.content, WELCOME_MESSAGE)
        self.assertFalse(first.is_user)

    def test_send_appends_user_and_assistant_messages(self) -> None:
        stamp = datetime(2024, 5, 1, 9, 30)
        session = AssistantSession(rng=random.Random(1), clock=lambda: stamp)
        reply = session.send_message("add task: Buy milk")
        self.assertIsNotNone(reply)
        self.assertEqual([i.text for i in session.tasks], ["Buy milk"])
        user, assistant = session.messages.messages[1:]
        self.assertTrue(user.is_user)
        self.assertEqual(user.content, "add task: Buy milk")
        self.assertFalse(assistant.is_user)
        self.assertEqual(assistant.timestamp, stamp)
        self.assertLess(user.id, assistant.id)

    def test_blank_send_is_ignored(self) -> None:
        session = AssistantSession()
        self.assertIsNone(session.send_message("   "))
        self.assertEqual(len(session.messages), 1)

    def test_send_uses_and_clears_draft(self) -> None:
        session = AssistantSession(rng=random.Random(0))
        session.draft = "show my tasks"
        self.assertIsNotNone(session.send_message())
        self.assertEqual(session.draft, "")
        self.assertEqual(session.messages.user_messages()[0].content, "show my tasks")

    def test_hello_on_empty_store_mentions_clean_slate(self) -> None:
        session = AssistantSession(rng=random.Random(3))
        reply = session.send_message("hello")
        self.assertIn("slate is clean", reply.content)
        self.assertNotIn("pending task", reply.content)

    def test_unmatched_message_goes_to_remote_completion(self) -> None:
        backend = _StaticBackend("Penguins live in the southern hemisphere.")
        session = AssistantSession(completion=backend)
        reply = session.send_message("tell me about penguins")
        self.assertEqual(reply.content, "Penguins live in the southern hemisphere.")
        self.assertEqual(backend.prompts, ["tell me about penguins"])

    def test_local_intents_never_call_remote(self) -> None:
        backend = _StaticBackend("unused")
        session = AssistantSession(completion=backend)
        session.send_message("what's my progress")
        self.assertEqual(backend.prompts, [])

    def test_remote_failures_fall_back_to_canned_reply(self) -> None:
        failures = [
            httpx.ConnectError("offline"),
            httpx.ReadTimeout("timed out"),
            CompletionError("generated_text missing or empty"),
            ValueError("invalid json"),
        ]
        for failure in failures:
            with self.subTest(failure=type(failure).__name__):
                session = AssistantSession(completion=_StaticBackend(failure), rng=random.Random(5))
                with self.assertLogs("taskmate.assistant", level="WARNING"):
                    reply = session.send_message("tell me about penguins")
                self.assertIn(reply.content, FALLBACK_REPLIES)
                self.assertFalse(session.is_busy)

    def test_malformed_endpoint_url_falls_back_to_canned_reply(self) -> None:
        for api_url in ("http://a.com/\x00", "http://a.com:abc"):
            with self.subTest(api_url=api_url):
                client = CompletionClient(api_url=api_url, api_key="k")
                session = AssistantSession(completion=client, rng=random.Random(5))
                with self.assertLogs("taskmate.assistant", level="WARNING"):
                    reply = session.send_message("tell me about penguins")
                self.assertIn(reply.content, FALLBACK_REPLIES)
                self.assertEqual([m.is_user for m in session.messages], [False, True, False])

    def test_missing_credential_appends_hint(self) -> None:
        session = AssistantSession(rng=random.Random(2))
        reply = session.send_message("tell me about penguins")
        self.assertTrue(reply.content.endswith(CONFIGURE_KEY_HINT))
        self.assertIn(reply.content[: -len(CONFIGURE_KEY_HINT) - 1], FALLBACK_REPLIES)

    def test_send_while_busy_is_rejected(self) -> None:
        backend = _BlockingBackend()
        session = AssistantSession(completion=backend)
        results: list[object] = []
        worker = threading.Thread(
            target=lambda: results.append(session.send_message("tell me about penguins"))
        )
        worker.start()
        try:
            self.assertTrue(backend.started.wait(timeout=5))
            self.assertTrue(session.is_busy)
            self.assertIsNone(session.send_message("show my tasks"))
            self.assertEqual(len(session.messages.user_messages()), 1)
        finally:
            backend.release.set()
            worker.join(timeout=5)
        self.assertEqual(results[0].content, "late answer")
        self.assertFalse(session.is_busy)
        self.assertEqual(len(session.messages), 3)

    def test_toggle_chat_panel(self) -> None:
        session = AssistantSession()
        self.assertFalse(session.chat_open)
        self.assertTrue(session.toggle_chat_panel())
        self.assertFalse(session.toggle_chat_panel())

    def test_task_operations_delegate_to_store(self) -> None:
        session = AssistantSession()
        item = session.add_task("Write report")
        session.toggle_completed(item.id)
        self.assertEqual(session.completed_count(), 1)
        session.delete_task(item.id)
        self.assertEqual(len(session.tasks), 0)


if __name__ == "__main__":
    unittest.main()
