from taskmate.assistant import AssistantSession
from taskmate.chat_log import ChatLog
from taskmate.classifier import Intent, classify_intent
from taskmate.models import ChatMessage, IdSequence, TodoItem
from taskmate.store import TaskStore

__all__ = [
    "AssistantSession",
    "ChatLog",
    "ChatMessage",
    "IdSequence",
    "Intent",
    "TaskStore",
    "TodoItem",
    "classify_intent",
]
