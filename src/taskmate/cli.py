from __future__ import annotations

import json
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from taskmate.assistant import AssistantSession
from taskmate.cli_format import format_chat_panel, format_tasks
from taskmate.config import CompletionSettings, load_paths, load_settings, save_settings
from taskmate.llm import CompletionClient
from taskmate.prompts import HELP_TEXT

app = typer.Typer(help="Task list with a chat assistant")

SLASH_HELP = "\n".join(
    [
        "/tasks          show the task table",
        "/add <text>     add a task",
        "/done <n>       toggle task n between pending and done",
        "/rm <n>         delete task n",
        "/panel          show or hide the chat panel",
        "/help           show this help",
    ]
)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _build_completion_client(settings: CompletionSettings) -> CompletionClient | None:
    if not settings.api_key:
        return None
    return CompletionClient(
        api_url=settings.api_url,
        api_key=settings.api_key,
        max_length=settings.max_length,
        temperature=settings.temperature,
    )


def _build_session() -> AssistantSession:
    paths = load_paths()
    settings = load_settings(paths.config_path)
    return AssistantSession(completion=_build_completion_client(settings))


def _resolve_task_id(session: AssistantSession, raw: str) -> int:
    items = session.tasks.items
    try:
        position = int(raw)
    except ValueError:
        raise typer.BadParameter(f"Task number expected, got {raw!r}.") from None
    if position < 1 or position > len(items):
        raise typer.BadParameter(f"No task number {position}.")
    return items[position - 1].id


def _run_slash_command(session: AssistantSession, console: Console, line: str) -> None:
    command, _, argument = line.partition(" ")
    argument = argument.strip()
    if command == "/tasks":
        pass
    elif command == "/add":
        if session.add_task(argument) is None:
            console.print("[dim]Nothing to add.[/dim]")
    elif command in {"/done", "/rm"}:
        try:
            item_id = _resolve_task_id(session, argument)
        except typer.BadParameter as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            return
        if command == "/done":
            session.toggle_completed(item_id)
        else:
            session.delete_task(item_id)
    elif command == "/panel":
        state = "open" if session.toggle_chat_panel() else "closed"
        console.print(f"[dim]Chat panel {state}.[/dim]")
        if session.chat_open:
            console.print(format_chat_panel(session.messages.messages))
        return
    elif command == "/help":
        console.print(escape(SLASH_HELP))
        return
    else:
        console.print(f"[red]Unknown command {escape(command)}. Try /help.[/red]")
        return
    console.print(format_tasks(session.tasks.items, session.completed_count()))


@app.command()
def chat(
    message: Optional[str] = typer.Argument(None, help="Message to send to the assistant."),
) -> None:
    """Start a chat loop or run a single turn if message is provided."""
    session = _build_session()
    console = Console()

    def run_turn(user_input: str) -> None:
        reply = session.send_message(user_input)
        if reply is None:
            return
        console.print(f"[bold green]Assistant[/bold green]: {escape(reply.content)}")

    if message:
        run_turn(message)
        return

    console.print("[dim]taskmate chat (type 'exit' to quit, '/help' for commands)[/dim]")
    console.print(f"[bold green]Assistant[/bold green]: {escape(session.messages.messages[0].content)}")
    while True:
        user_input = console.input("[bold cyan]You[/bold cyan]: ")
        stripped = user_input.strip()
        if stripped.lower() in {"exit", "quit"}:
            break
        if stripped.startswith("/"):
            _run_slash_command(session, console, stripped)
            continue
        run_turn(user_input)


@app.command()
def setup() -> None:
    """Configure the remote completion endpoint."""
    paths = load_paths()
    current = load_settings(paths.config_path)
    typer.echo("Setting up taskmate configuration.")
    api_url = typer.prompt("Completion endpoint URL", default=current.api_url)
    api_key = typer.prompt("API key (leave blank to disable)", default="", hide_input=True)
    settings = CompletionSettings(
        api_url=api_url,
        api_key=api_key or None,
        max_length=current.max_length,
        temperature=current.temperature,
    )
    save_settings(paths.config_path, settings)
    typer.echo(f"Config saved to {paths.config_path}")


@app.command()
def doctor() -> None:
    """Report the effective completion settings."""
    paths = load_paths()
    settings = load_settings(paths.config_path)
    report = {
        "config_path": str(paths.config_path),
        "config_exists": paths.config_path.exists(),
        "api_url": settings.api_url,
        "credential_configured": settings.has_credential,
    }
    typer.echo(json.dumps(report, indent=2))


@app.command()
def capabilities() -> None:
    """Show what the assistant understands."""
    typer.echo(HELP_TEXT)
