from __future__ import annotations

import logging
import random
import threading
from datetime import datetime
from typing import Callable

from taskmate.chat_log import ChatLog
from taskmate.classifier import Intent, classify_intent
from taskmate.commands import handle_todo_command
from taskmate.llm import CompletionBackend
from taskmate.models import ChatMessage, IdSequence, TodoItem
from taskmate.prompts import WELCOME_MESSAGE
from taskmate.responses import (
    breakdown_reply,
    canned_fallback,
    greeting_reply,
    help_reply,
    motivation_reply,
    organize_reply,
    progress_reply,
    time_management_reply,
)
from taskmate.store import TaskStore

logger = logging.getLogger(__name__)

Responder = Callable[["AssistantSession", str], str]

RESPONDERS: dict[Intent, Responder] = {
    Intent.TODO: handle_todo_command,
    Intent.ORGANIZE: organize_reply,
    Intent.MOTIVATE: motivation_reply,
    Intent.BREAKDOWN: breakdown_reply,
    Intent.TIME_MANAGEMENT: time_management_reply,
    Intent.PROGRESS: progress_reply,
    Intent.GREETING: greeting_reply,
    Intent.HELP: help_reply,
}


class AssistantSession:
    """One user's task list and conversation.

    ``send_message`` admits a single send at a time; a send issued while
    another is still waiting on the completion endpoint is rejected.
    """

    def __init__(
        self,
        completion: CompletionBackend | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        ids: IdSequence | None = None,
    ) -> None:
        shared_ids = ids or IdSequence()
        self.completion = completion
        self.rng = rng or random.Random()
        self.tasks = TaskStore(shared_ids)
        self.messages = ChatLog(shared_ids, clock=clock)
        self.chat_open = False
        self.draft = ""
        self._busy = threading.Lock()
        self.messages.append(WELCOME_MESSAGE, is_user=False)

    @property
    def is_busy(self) -> bool:
        return self._busy.locked()

    def add_task(self, text: str | None) -> TodoItem | None:
        return self.tasks.add_task(text)

    def delete_task(self, item_id: int) -> None:
        self.tasks.delete_task(item_id)

    def toggle_completed(self, item_id: int) -> None:
        self.tasks.toggle_completed(item_id)

    def completed_count(self) -> int:
        return self.tasks.completed_count()

    def toggle_chat_panel(self) -> bool:
        self.chat_open = not self.chat_open
        return self.chat_open

    def send_message(self, text: str | None = None) -> ChatMessage | None:
        content = (self.draft if text is None else text).strip()
        if not content:
            return None
        if not self._busy.acquire(blocking=False):
            logger.debug("Rejected send while another message is in flight")
            return None
        try:
            self.messages.append(content, is_user=True)
            if text is None:
                self.draft = ""
            reply = self.respond(content)
            return self.messages.append(reply, is_user=False)
        finally:
            self._busy.release()

    def respond(self, message: str) -> str:
        intent = classify_intent(message)
        logger.debug("Classified message as %s", intent.value)
        responder = RESPONDERS.get(intent)
        if responder is not None:
            return responder(self, message)
        return self._remote_reply(message)

    def _remote_reply(self, message: str) -> str:
        if self.completion is None:
            return canned_fallback(self, hint=True)
        try:
            return self.completion.generate(message).content
        except Exception as exc:  # noqa: BLE001
            logger.warning("Remote completion failed: %s", exc)
            return canned_fallback(self)
