from __future__ import annotations

import re
from typing import TYPE_CHECKING

from taskmate.classifier import contains_any
from taskmate.prompts import ADD_TASK_RETRY, TODO_HELP_TEXT
from taskmate.responses import plural_suffix

if TYPE_CHECKING:
    from taskmate.assistant import AssistantSession

_TOKEN_RE = re.compile(r"[^\s:]+|:")
_TASK_WORDS = {"task", "tasks", "todo", "todos", "to-do"}
_FILLER_WORDS = {"a", "an", "the", "new", "my", "another"}


def parse_add_command(message: str) -> str | None:
    """Extract the task text from an add command.

    Grammar: ``add [:] [filler...] [task|todo] [:] <text>``. A colon is always
    its own token, so "add task:Buy milk" separates cleanly. Filler words are
    only consumed when a task keyword follows them, so "add the report" keeps
    "the report" as the text. Returns None when nothing is left after the
    keywords.
    """
    tokens = list(_TOKEN_RE.finditer(message))
    start = None
    for idx, match in enumerate(tokens):
        if match.group().lower() == "add":
            start = idx + 1
            break
    if start is None:
        return None
    if start < len(tokens) and tokens[start].group() == ":":
        start += 1

    cursor = start
    probe = start
    while probe < len(tokens) and tokens[probe].group().lower() in _FILLER_WORDS:
        probe += 1
    if probe < len(tokens) and tokens[probe].group().lower() in _TASK_WORDS:
        cursor = probe + 1
    if cursor < len(tokens) and tokens[cursor].group() == ":":
        cursor += 1
    if cursor >= len(tokens):
        return None

    text = message[tokens[cursor].start():].strip()
    return text or None

def handle_todo_command(session: AssistantSession, message: str) -> str:
    text = message.lower()
    store = session.tasks

    if "add" in text and contains_any(text, ("task", "todo")):
        task_text = parse_add_command(message)
        if task_text is None:
            return ADD_TASK_RETRY
        session.add_task(task_text)
        total = len(store)
        return f'Added "{task_text}" to your list. You now have {total} task{plural_suffix(total)}.'

    if contains_any(text, ("list", "show")):
        if len(store) == 0:
            return "Your list is empty. Try \"add task: Something to do\" to get started."
        pending = store.pending()
        if pending:
            lines = ["Here are your pending tasks:"]
            lines.extend(f"{idx}. {item.text}" for idx, item in enumerate(pending, start=1))
        else:
            lines = ["Nothing pending right now."]
        completed = store.completed_count()
        if completed:
            lines.append(f"You've also completed {completed} task{plural_suffix(completed)}.")
        return "\n".join(lines)

    if contains_any(text, ("complete", "done")):
        pending = store.pending()
        if not pending:
            return "Everything is already done. Great work!"
        names = ", ".join(f'"{item.text}"' for item in pending)
        return f"Which task did you finish? Your pending tasks are: {names}."

    if contains_any(text, ("delete", "remove")):
        if len(store) == 0:
            return "There's nothing to delete. Your list is empty."
        names = ", ".join(f'"{item.text}"' for item in store)
        return f"Which task should I remove? Your tasks are: {names}."

    return TODO_HELP_TEXT
