from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterator

from taskmate.models import ChatMessage, IdSequence


class ChatLog:
    def __init__(
        self,
        ids: IdSequence | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._ids = ids or IdSequence()
        self._clock = clock or datetime.now
        self._messages: list[ChatMessage] = []

    def append(self, content: str, *, is_user: bool) -> ChatMessage:
        message = ChatMessage(
            id=self._ids.next_id(),
            content=content,
            is_user=is_user,
            timestamp=self._clock(),
        )
        self._messages.append(message)
        return message

    def user_messages(self) -> list[ChatMessage]:
        return [m for m in self._messages if m.is_user]

    @property
    def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    @property
    def last(self) -> ChatMessage | None:
        return self._messages[-1] if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(list(self._messages))
