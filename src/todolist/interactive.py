"""Interactive terminal view for browsing and toggling todos.

Keys: ``j``/Down next, ``k``/Up previous, ``h``/Left clear the selection,
``t`` toggle the selected todo, ``q`` quit.
"""

import curses
import logging
from typing import List, Optional

from .config import ConfigModel
from .todo import Todo

logger = logging.getLogger(__name__)

# Color pair numbers
HIGHLIGHT_PAIR = 1
COMPLETED_PAIR = 2


class SelectionList:
    """Cursor over a list of a fixed size; movement wraps at the ends."""

    def __init__(self, size: int):
        self.size = size
        self.selected: Optional[int] = None

    def next(self):
        if self.size == 0:
            return
        if self.selected is None or self.selected >= self.size - 1:
            self.selected = 0
        else:
            self.selected += 1

    def previous(self):
        if self.size == 0:
            return
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = self.size - 1
        else:
            self.selected -= 1

    def unselect(self):
        self.selected = None


class InteractiveApp:
    """State of an interactive session over a caller-owned list of todos."""

    def __init__(self, todos: List[Todo]):
        self.todos = todos
        self.selection = SelectionList(len(todos))
        self.should_quit = False

    def toggle(self, index: int):
        self.todos[index].toggle()
        logger.debug(f"Toggled todo {self.todos[index].id}")

    def handle_key(self, key: int):
        """Apply one key press; unknown keys are ignored."""
        if key in (curses.KEY_LEFT, ord("h")):
            self.selection.unselect()
        elif key in (curses.KEY_DOWN, ord("j")):
            self.selection.next()
        elif key in (curses.KEY_UP, ord("k")):
            self.selection.previous()
        elif key == ord("t"):
            if self.selection.selected is not None:
                self.toggle(self.selection.selected)
        elif key == ord("q"):
            self.should_quit = True


def _init_colors():
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(HIGHLIGHT_PAIR, curses.COLOR_BLACK, curses.COLOR_CYAN)
    curses.init_pair(COMPLETED_PAIR, curses.COLOR_YELLOW, -1)


def _row_attr(app: InteractiveApp, index: int) -> int:
    if index == app.selection.selected:
        return curses.color_pair(HIGHLIGHT_PAIR) | curses.A_BOLD
    if app.todos[index].completed:
        return curses.color_pair(COMPLETED_PAIR)
    return curses.A_NORMAL


def draw(stdscr, app: InteractiveApp, config: ConfigModel):
    """Draw the bordered todo viewport in the top-left corner."""
    max_y, max_x = stdscr.getmaxyx()
    height = min(config.viewport_height, max_y)
    width = min(config.viewport_width, max_x)

    stdscr.erase()
    stdscr.noutrefresh()
    if height < 3 or width < 4:
        curses.doupdate()
        return

    win = curses.newwin(height, width, 0, 0)
    win.box()
    win.addnstr(0, 2, " Todos ", width - 4)

    rows = height - 2
    # Scroll so the selected row stays visible
    offset = 0
    if app.selection.selected is not None and app.selection.selected >= rows:
        offset = app.selection.selected - rows + 1

    for row, index in enumerate(range(offset, min(offset + rows, len(app.todos)))):
        todo = app.todos[index]
        marker = "[x]" if todo.completed else "[ ]"
        line = f"{marker} {todo.text}"
        try:
            win.addnstr(row + 1, 1, line.ljust(width - 2), width - 2, _row_attr(app, index))
        except curses.error:
            pass  # Terminal shrank mid-draw

    win.noutrefresh()
    curses.doupdate()


def _session(stdscr, app: InteractiveApp, config: ConfigModel):
    try:
        curses.curs_set(0)
    except curses.error:
        pass  # Terminal cannot hide the cursor
    stdscr.keypad(True)
    stdscr.timeout(config.poll_interval_ms)
    _init_colors()

    while not app.should_quit:
        draw(stdscr, app, config)
        key = stdscr.getch()
        if key != -1:
            app.handle_key(key)


def run_interactive(todos: List[Todo], config: Optional[ConfigModel] = None) -> InteractiveApp:
    """Run a blocking interactive session; toggles mutate ``todos`` in place."""
    if config is None:
        config = ConfigModel()

    app = InteractiveApp(todos)
    curses.wrapper(_session, app, config)
    return app
