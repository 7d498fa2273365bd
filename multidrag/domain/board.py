"""Module: board.py.

Date: 2026-10-19

Immutable board snapshot: tasks, columns and the column order.

Every operation that changes the board returns a new Board; existing
snapshots are never modified, so any holder of an old snapshot keeps a
consistent view until it is replaced.

Invariants checked on construction:
- every task id appears in exactly one column
- every task id in a column exists in the task table
- column_order lists exactly the column ids, once each
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from multidrag.domain.drag import DraggableLocation
from multidrag.domain.errors import InvalidBoardError, InvalidDragState, TaskNotFoundError


@dataclass(frozen=True, slots=True)
class Task:
    """A single card on the board. Identity is the id."""

    id: str
    content: str = ""


@dataclass(frozen=True, slots=True)
class Column:
    """An ordered list of task ids under a title."""

    id: str
    title: str
    task_ids: tuple[str, ...] = ()

    def __post_init__(self):
        task_ids = tuple(self.task_ids)
        if len(set(task_ids)) != len(task_ids):
            raise InvalidBoardError(f"Column {self.id!r} lists a task id more than once")
        object.__setattr__(self, "task_ids", task_ids)

    def __len__(self) -> int:
        return len(self.task_ids)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self.task_ids

    def index_of(self, task_id: str) -> int:
        try:
            return self.task_ids.index(task_id)
        except ValueError:
            raise TaskNotFoundError(task_id) from None

    def with_task_ids(self, task_ids: Iterable[str]) -> Column:
        """Return a copy of this column holding task_ids."""
        return Column(id=self.id, title=self.title, task_ids=tuple(task_ids))


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable board snapshot.

    Attributes:
        column_order: Column ids in display order
        columns: Column id -> Column (read-only mapping)
        tasks: Task id -> Task (read-only mapping)

    """

    column_order: tuple[str, ...]
    columns: Mapping[str, Column]
    tasks: Mapping[str, Task]
    _home_index: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        column_order = tuple(self.column_order)
        columns = MappingProxyType(dict(self.columns))
        tasks = MappingProxyType(dict(self.tasks))

        if len(set(column_order)) != len(column_order):
            raise InvalidBoardError("column_order contains duplicate column ids")
        if set(column_order) != set(columns):
            raise InvalidBoardError(
                f"column_order {list(column_order)} does not match columns {sorted(columns)}"
            )

        home_index: dict[str, str] = {}
        for column_id in column_order:
            column = columns[column_id]
            if column.id != column_id:
                raise InvalidBoardError(f"Column keyed {column_id!r} has id {column.id!r}")
            for task_id in column.task_ids:
                if task_id not in tasks:
                    raise InvalidBoardError(
                        f"Column {column_id!r} references unknown task {task_id!r}"
                    )
                if task_id in home_index:
                    raise InvalidBoardError(
                        f"Task {task_id!r} appears in both {home_index[task_id]!r} "
                        f"and {column_id!r}"
                    )
                home_index[task_id] = column_id

        object.__setattr__(self, "column_order", column_order)
        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "tasks", tasks)
        object.__setattr__(self, "_home_index", MappingProxyType(home_index))

    # =====================================
    # Construction
    # =====================================

    @classmethod
    def from_columns(cls, columns: Iterable[Column], tasks: Iterable[Task]) -> Board:
        """Build a board whose column order follows the iteration order of columns."""
        columns = list(columns)
        return cls(
            column_order=tuple(column.id for column in columns),
            columns={column.id: column for column in columns},
            tasks={task.id: task for task in tasks},
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Board:
        """Build a board from the entities shape used by board front-ends.

        Expected shape::

            {
                "columnOrder": ["todo", "done"],
                "columns": {"todo": {"id": "todo", "title": "To do", "taskIds": ["t1"]}},
                "tasks": {"t1": {"id": "t1", "content": "Write tests"}},
            }
        """
        try:
            columns = {
                column_id: Column(
                    id=raw.get("id", column_id),
                    title=raw.get("title", ""),
                    task_ids=tuple(raw.get("taskIds", ())),
                )
                for column_id, raw in data["columns"].items()
            }
            tasks = {
                task_id: Task(id=raw.get("id", task_id), content=raw.get("content", ""))
                for task_id, raw in data["tasks"].items()
            }
            column_order = tuple(data["columnOrder"])
        except (KeyError, AttributeError, TypeError) as e:
            raise InvalidBoardError(f"Malformed board data: {e}") from e

        return cls(column_order=column_order, columns=columns, tasks=tasks)

    def to_dict(self) -> dict[str, Any]:
        """Inverse of from_dict()."""
        return {
            "columnOrder": list(self.column_order),
            "columns": {
                column_id: {
                    "id": column.id,
                    "title": column.title,
                    "taskIds": list(column.task_ids),
                }
                for column_id, column in self.columns.items()
            },
            "tasks": {
                task_id: {"id": task.id, "content": task.content}
                for task_id, task in self.tasks.items()
            },
        }

    def with_columns(self, updated: Mapping[str, Column]) -> Board:
        """Return a new board with the given columns replaced."""
        columns = dict(self.columns)
        columns.update(updated)
        return Board(column_order=self.column_order, columns=columns, tasks=self.tasks)

    # =====================================
    # Lookups
    # =====================================

    @property
    def task_count(self) -> int:
        """Number of tasks placed in columns."""
        return len(self._home_index)

    def contains(self, task_id: str) -> bool:
        return task_id in self._home_index

    def home_column(self, task_id: str) -> Column:
        """Return the column currently holding task_id."""
        column_id = self._home_index.get(task_id)
        if column_id is None:
            raise TaskNotFoundError(task_id)
        return self.columns[column_id]

    def location_of(self, task_id: str) -> DraggableLocation:
        column = self.home_column(task_id)
        return DraggableLocation(column.id, column.index_of(task_id))

    def tasks_in(self, column_id: str) -> list[Task]:
        """Return the Task objects of a column in display order."""
        return [self.tasks[task_id] for task_id in self.columns[column_id].task_ids]

    def task_at(self, location: DraggableLocation) -> str:
        """Return the task id at location.

        Raises:
            InvalidDragState: If the column does not exist or the index is out of range

        """
        column = self.columns.get(location.column_id)
        if column is None:
            raise InvalidDragState(f"Unknown column {location.column_id!r}")
        if not 0 <= location.index < len(column):
            raise InvalidDragState(
                f"Index {location.index} out of range for column {column.id!r} "
                f"({len(column)} tasks)"
            )
        return column.task_ids[location.index]

    def columns_from(self, column_id: str) -> list[str]:
        """Return column_order rotated so that it starts at column_id."""
        start = self.column_order.index(column_id)
        return list(self.column_order[start:] + self.column_order[:start])
