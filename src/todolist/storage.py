"""JSON file storage for todolist."""

import json
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .todo import Todo

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "db.json"


class TodoIndexError(IndexError):
    """Raised when a positional index does not address a todo."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"no todo at index {index} (have {size})")


class TodoStore:
    """Ordered collection of todos backed by a JSON file.

    The file holds ``{"todos": [...]}``. Insertion order is kept both in
    memory and on disk.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_DB_PATH):
        self.path = Path(path)
        self.todos: List[Todo] = []

    def __len__(self) -> int:
        return len(self.todos)

    def __iter__(self) -> Iterator[Todo]:
        return iter(self.todos)

    def load(self) -> None:
        """Read the backing file, creating it if absent.

        Empty files yield an empty collection. Content that does not parse as
        the expected structure is logged and the current collection is kept.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        with open(self.path, "a+b") as f:
            f.seek(0)
            raw = f.read()

        try:
            # UnicodeDecodeError and json.JSONDecodeError are both ValueErrors
            content = raw.decode("utf-8")
            if not content.strip():
                self.todos = []
                return
            self.todos = self._parse(content)
        except ValueError as e:
            logger.error(f"Ignoring {self.path}, could not parse contents: {e}")
            return

        logger.debug(f"Loaded {len(self.todos)} todos from {self.path}")

    @staticmethod
    def _parse(content: str) -> List[Todo]:
        data = json.loads(content)
        if not isinstance(data, dict) or "todos" not in data:
            raise ValueError("expected an object with a 'todos' list")
        if not isinstance(data["todos"], list):
            raise ValueError("'todos' must be a list")
        return [Todo.from_dict(item) for item in data["todos"]]

    def save(self) -> None:
        """Overwrite the backing file with the whole collection.

        The file must already exist; ``load`` creates it.

        Raises:
            FileNotFoundError: If the backing file does not exist.
            OSError: On any other write failure.
        """
        payload = json.dumps(
            {"todos": [todo.to_dict() for todo in self.todos]},
            indent=2,
            ensure_ascii=False,
        )
        with open(self.path, "r+", encoding="utf-8") as f:
            f.truncate(0)
            f.write(payload)

        logger.debug(f"Saved {len(self.todos)} todos to {self.path}")

    def next_id(self) -> int:
        """Return an id greater than every id in the collection."""
        if not self.todos:
            return 1
        return max(todo.id for todo in self.todos) + 1

    def add(self, text: str) -> Todo:
        """Append a new pending todo and return it."""
        todo = Todo.create(self.next_id(), text)
        self.todos.append(todo)
        logger.info(f"Added todo {todo.id}: {text}")
        return todo

    def get(self, todo_id: int) -> Optional[Todo]:
        """Return the todo with ``todo_id``, or None."""
        for todo in self.todos:
            if todo.id == todo_id:
                return todo
        return None

    def at_index(self, index: int) -> Todo:
        """Return the todo at a position in the current order.

        Raises:
            TodoIndexError: If ``index`` is negative or out of range.
        """
        if index < 0 or index >= len(self.todos):
            raise TodoIndexError(index, len(self.todos))
        return self.todos[index]

    def remove(self, todo_id: int) -> None:
        """Delete the todo with ``todo_id``; absent ids are ignored."""
        self.todos = [todo for todo in self.todos if todo.id != todo_id]

    def mark_completed(self, todo_id: int) -> None:
        """Mark the todo with ``todo_id`` completed, if present."""
        todo = self.get(todo_id)
        if todo is not None:
            todo.set_completed(True)

    def unmark_completed(self, todo_id: int) -> None:
        """Mark the todo with ``todo_id`` pending, if present."""
        todo = self.get(todo_id)
        if todo is not None:
            todo.set_completed(False)
