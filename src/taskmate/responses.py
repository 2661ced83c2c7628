"""Reply generators for every intent other than task commands.

Each generator receives the session and the raw message and returns the reply
text. Template choices go through ``session.rng`` so a seeded session always
picks the same template.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from taskmate.prompts import (
    BREAKDOWN_ADVICE,
    CLEAN_SLATE_SUFFIX,
    CONFIGURE_KEY_HINT,
    FALLBACK_REPLIES,
    GREETINGS,
    HELP_TEXT,
    MOTIVATION_TIPS,
    ORGANIZE_ADVICE,
    PENDING_SUFFIX,
    TIME_MANAGEMENT_TIPS,
)

if TYPE_CHECKING:
    from taskmate.assistant import AssistantSession

ALMOST_THERE_THRESHOLD = 70


def completion_percent(completed: int, total: int) -> int:
    """Percentage of completed tasks, rounded half up to a whole number."""
    if total <= 0:
        return 0
    return int(math.floor(100 * completed / total + 0.5))


def organize_reply(session: AssistantSession, message: str) -> str:
    pending = len(session.tasks.pending())
    if pending == 0:
        return f"{ORGANIZE_ADVICE} Start by adding the things on your mind as tasks."
    return f"{ORGANIZE_ADVICE} You have {pending} pending task{plural_suffix(pending)} to sort."


def motivation_reply(session: AssistantSession, message: str) -> str:
    tip = session.rng.choice(MOTIVATION_TIPS)
    total = len(session.tasks)
    if total == 0:
        return tip
    completed = session.tasks.completed_count()
    percent = completion_percent(completed, total)
    return f"{tip} You've completed {completed} of {total} tasks ({percent}%)."


def breakdown_reply(session: AssistantSession, message: str) -> str:
    pending = session.tasks.pending()
    if not pending:
        return BREAKDOWN_ADVICE
    return f'{BREAKDOWN_ADVICE} For example, what is the first small step of "{pending[0].text}"?'


def time_management_reply(session: AssistantSession, message: str) -> str:
    tip = session.rng.choice(TIME_MANAGEMENT_TIPS)
    pending = len(session.tasks.pending())
    if pending == 0:
        return tip
    return f"{tip} You currently have {pending} pending task{plural_suffix(pending)}."


def progress_reply(session: AssistantSession, message: str) -> str:
    total = len(session.tasks)
    if total == 0:
        return "You don't have any tasks yet. Add one and I'll track your progress."
    completed = session.tasks.completed_count()
    percent = completion_percent(completed, total)
    stats = f"{completed} of {total} tasks done ({percent}%)."
    if completed == 0:
        return f"You're ready to start! {stats}"
    if completed == total:
        return f"Congratulations, you finished everything! {stats}"
    if percent >= ALMOST_THERE_THRESHOLD:
        return f"You're almost there! {stats}"
    return f"Keep going, you're making progress. {stats}"


def greeting_reply(session: AssistantSession, message: str) -> str:
    greeting = session.rng.choice(GREETINGS)
    pending = len(session.tasks.pending())
    if pending == 0:
        return f"{greeting} {CLEAN_SLATE_SUFFIX}"
    return f"{greeting} {PENDING_SUFFIX.format(pending=pending, plural=plural_suffix(pending))}"


def help_reply(session: AssistantSession, message: str) -> str:
    return HELP_TEXT


def canned_fallback(session: AssistantSession, *, hint: bool = False) -> str:
    reply = session.rng.choice(FALLBACK_REPLIES)
    if hint:
        return f"{reply} {CONFIGURE_KEY_HINT}"
    return reply


def plural_suffix(count: int) -> str:
    return "" if count == 1 else "s"
