"""Grouped listing of todos by creation day."""

from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.text import Text

from .labeler import categorize_timestamp
from .todo import Todo
from .utils.datetime import now_local


def partition_todos(
    todos: Sequence[Todo], now: Optional[datetime] = None
) -> Tuple[List[Todo], List[Todo]]:
    """Split todos into (recent, other), keeping their relative order.

    Recent todos were created today or yesterday.
    """
    if now is None:
        now = now_local()

    recent, other = [], []
    for todo in todos:
        if categorize_timestamp(todo.created_at, now).is_recent:
            recent.append(todo)
        else:
            other.append(todo)
    return recent, other


def format_todo_for_display(index: int, todo: Todo) -> Text:
    """Format one listing line: italic index, then the styled text."""
    style = "todo.completed" if todo.completed else "todo.pending"
    line = Text()
    line.append(f"{index}.", style="todo.index")
    line.append(" ")
    line.append(todo.text, style=style)
    return line


def render_grouped(
    todos: Sequence[Todo], console: Console, now: Optional[datetime] = None
) -> None:
    """Print todos grouped as older items first, then recent ones.

    Each group gets a single header taken from its first item's label, so a
    group spanning several older dates shows only the first date.
    """
    if now is None:
        now = now_local()

    recent, other = partition_todos(todos, now)

    for group in (other, recent):
        if not group:
            continue
        header = categorize_timestamp(group[0].created_at, now)
        console.print(Text(str(header), style="header"))
        for index, todo in enumerate(group):
            console.print(format_todo_for_display(index, todo))
