"""Console styling for todolist."""

from rich.console import Console
from rich.theme import Theme

TODO_THEME = Theme({
    'header': "bold",
    'error': "red bold",
    'todo.index': "italic",
    'todo.pending': "bright_red",
    'todo.completed': "green strike",
})


def get_themed_console(no_color: bool = False, **kwargs) -> Console:
    """Get a console with the todolist theme applied."""
    return Console(theme=TODO_THEME, no_color=no_color, **kwargs)
