"""Rich formatting helpers for taskmate CLI output.

Each function takes session data (task items, chat messages) and returns a
Rich renderable.
"""

from __future__ import annotations

from typing import Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskmate.models import ChatMessage, TodoItem


def task_status(item: TodoItem) -> str:
    """Status cell markup for a task row."""
    if item.completed:
        return "[green]done[/green]"
    return "[yellow]pending[/yellow]"


def clip(text: str, width: int = 80) -> str:
    """Collapse a task text onto one line of at most *width* characters."""
    flat = " ".join(text.split())
    return flat if len(flat) <= width else flat[: width - 1] + "…"


def format_tasks(items: Sequence[TodoItem], completed: int) -> Table:
    """Numbered task table; the numbers are what `/done` and `/rm` accept."""
    table = Table(title=f"Tasks ({completed}/{len(items)} done)")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Task", style="bold")
    table.add_column("Status")
    if not items:
        table.add_row("-", "No tasks yet", "")
        return table
    for idx, item in enumerate(items, start=1):
        table.add_row(str(idx), escape(clip(item.text)), task_status(item))
    return table


def format_message(message: ChatMessage) -> Text:
    speaker = "You" if message.is_user else "Assistant"
    style = "bold cyan" if message.is_user else "bold green"
    line = Text()
    line.append(f"{speaker}", style=style)
    line.append(f" [{message.timestamp:%H:%M}]", style="dim")
    line.append(": ")
    line.append(message.content)
    return line


def format_chat_panel(messages: Sequence[ChatMessage], limit: int = 10) -> Panel:
    recent = list(messages)[-limit:]
    body = Text("\n").join(format_message(m) for m in recent) if recent else Text("No messages")
    return Panel(body, title="Assistant", border_style="green")
