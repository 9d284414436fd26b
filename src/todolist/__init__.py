"""todolist - a small command-line todo list with day grouping."""

__version__ = "0.1.0"

from .todo import Todo
from .storage import TodoStore, TodoIndexError
from .labeler import TimestampCategory, TimestampLabel, categorize_timestamp

__all__ = [
    "Todo",
    "TodoStore",
    "TodoIndexError",
    "TimestampCategory",
    "TimestampLabel",
    "categorize_timestamp",
    "__version__",
]
