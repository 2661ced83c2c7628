from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Intent(str, Enum):
    TODO = "TODO"
    ORGANIZE = "ORGANIZE"
    MOTIVATE = "MOTIVATE"
    BREAKDOWN = "BREAKDOWN"
    TIME_MANAGEMENT = "TIME_MANAGEMENT"
    PROGRESS = "PROGRESS"
    GREETING = "GREETING"
    HELP = "HELP"
    FALLBACK = "FALLBACK"


@dataclass(frozen=True)
class IntentRule:
    intent: Intent
    keywords: tuple[str, ...]


# First match wins, so the order here is the tie-breaker between overlapping
# keyword sets ("done" is both a progress word and a completion command).
DEFAULT_RULES: tuple[IntentRule, ...] = (
    IntentRule(
        Intent.TODO,
        ("todo", "task", "add", "delete", "complete", "list", "show", "remove"),
    ),
    IntentRule(Intent.ORGANIZE, ("organize", "plan", "schedule")),
    IntentRule(Intent.MOTIVATE, ("motivat", "productiv", "focus")),
    IntentRule(Intent.BREAKDOWN, ("break down", "complex", "overwhelm")),
    IntentRule(Intent.TIME_MANAGEMENT, ("time", "deadline", "priority")),
    IntentRule(Intent.PROGRESS, ("progress", "status", "done")),
    IntentRule(Intent.GREETING, ("hello", "hi", "hey")),
    IntentRule(Intent.HELP, ("help", "what can", "how")),
)


def classify_intent(message: str, rules: Iterable[IntentRule] | None = None) -> Intent:
    text = message.lower()
    for rule in rules if rules is not None else DEFAULT_RULES:
        if contains_any(text, rule.keywords):
            return rule.intent
    return Intent.FALLBACK


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(kw.lower() in lowered for kw in keywords)
