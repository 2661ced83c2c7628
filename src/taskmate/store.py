from __future__ import annotations

from typing import Iterator

from taskmate.models import IdSequence, TodoItem


class TaskStore:
    """Ordered in-memory task list.

    Unknown ids and blank text are ignored rather than reported.
    """

    def __init__(self, ids: IdSequence | None = None) -> None:
        self._ids = ids or IdSequence()
        self._items: list[TodoItem] = []

    def add_task(self, text: str | None) -> TodoItem | None:
        if not text or not text.strip():
            return None
        item = TodoItem(id=self._ids.next_id(), text=text.strip())
        self._items.append(item)
        return item

    def delete_task(self, item_id: int) -> None:
        self._items = [item for item in self._items if item.id != item_id]

    def toggle_completed(self, item_id: int) -> None:
        item = self.get(item_id)
        if item is not None:
            item.completed = not item.completed

    def completed_count(self) -> int:
        return sum(1 for item in self._items if item.completed)

    def get(self, item_id: int) -> TodoItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def pending(self) -> list[TodoItem]:
        return [item for item in self._items if not item.completed]

    @property
    def items(self) -> list[TodoItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TodoItem]:
        return iter(list(self._items))
