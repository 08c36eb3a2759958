"""Menu model and run-status contracts for the CLI Home menu."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Union


class OutOfRange(IndexError):
    """Raised when a status lookup or update names a position outside the menu."""


@dataclass(frozen=True)
class Never:
    kind: str = field(default="never", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind}


@dataclass(frozen=True)
class Success:
    kind: str = field(default="success", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind}


@dataclass(frozen=True)
class Failed:
    message: str
    kind: str = field(default="failed", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "message": self.message}


RunStatus = Union[Never, Success, Failed]


@dataclass(frozen=True)
class MenuItem:
    label: str


DEFAULT_LABELS = [
    "Check for updates",
    "Weather",
    "Check Repo (Git only)",
    "quit",
]


class MenuModel:
    """Ordered menu items, a cursor, and the last run status of each item.

    The item list is fixed at construction. Statuses are index-aligned with
    the items and only change through ``set_status``; moving the cursor never
    touches them.
    """

    def __init__(self, labels: list[str]):
        if not labels:
            raise ValueError("menu needs at least one item")
        self._items = tuple(MenuItem(str(label)) for label in labels)
        self._statuses: list[RunStatus] = [Never() for _ in self._items]
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._items)

    @property
    def last_index(self) -> int:
        return len(self._items) - 1

    def move_up(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def move_down(self) -> None:
        if self._cursor < self.last_index:
            self._cursor += 1

    def current_index(self) -> int:
        return self._cursor

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise OutOfRange(f"menu index out of range: {index} (items: {len(self._items)})")

    def set_status(self, index: int, status: RunStatus) -> None:
        self._check(index)
        self._statuses[index] = status

    def status_of(self, index: int) -> RunStatus:
        self._check(index)
        return self._statuses[index]

    def label_of(self, index: int) -> str:
        self._check(index)
        return self._items[index].label

    def rows(self) -> Iterator[tuple[str, RunStatus]]:
        for item, status in zip(self._items, self._statuses):
            yield item.label, status

    def to_dict(self) -> dict[str, Any]:
        return {
            "cursor": self._cursor,
            "items": [
                {"index": i, "label": label, "status": status.to_dict()}
                for i, (label, status) in enumerate(self.rows())
            ],
        }


def default_menu() -> MenuModel:
    return MenuModel(DEFAULT_LABELS)
