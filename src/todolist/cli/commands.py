"""Commands for the todolist CLI."""

import logging
import sys
from typing import Callable

import click
from rich.console import Console

from ..config import ConfigModel, load_config
from ..listing import render_grouped
from ..storage import TodoIndexError, TodoStore
from ..theme import get_themed_console

logger = logging.getLogger(__name__)

DEBUG_MESSAGES = {
    0: "Debug mode is off",
    1: "Debug mode is kind of on",
    2: "Debug mode is on",
}

LOG_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
}


def setup_logging(debug: int):
    """Send log records to stdout at a level chosen by the debug count."""
    logging.basicConfig(
        stream=sys.stdout,
        level=LOG_LEVELS.get(debug, logging.DEBUG),
        format="%(levelname)s: %(message)s",
        force=True,
    )


def save_store(store: TodoStore):
    """Save the store, logging I/O failures instead of raising."""
    try:
        store.save()
    except OSError as e:
        logger.error(f"Could not save {store.path}: {e}")


def apply_at_index(ctx: click.Context, index: int, action: Callable[[TodoStore, int], None]):
    """Run ``action`` on the todo at a position, then print and save."""
    store: TodoStore = ctx.obj["store"]
    console: Console = ctx.obj["console"]

    try:
        todo = store.at_index(index)
    except TodoIndexError:
        console.print(f"[error]Error: no todo at index {index}[/error]")
        return

    action(store, todo.id)
    render_grouped(store.todos, console)
    save_store(store)


@click.group(invoke_without_command=True)
@click.option("--name", "-n", help="Name to echo back")
@click.option("--config", "-c", "config_path", type=click.Path(dir_okay=False),
              help="Path to a YAML config file")
@click.option("--debug", "-d", count=True, help="Increase debug output (repeatable)")
@click.pass_context
def cli(ctx, name, config_path, debug):
    """todolist - keep a short list of things to do."""
    setup_logging(debug)

    if name:
        click.echo(f"Value for name: {name}")
    if config_path:
        click.echo(f"Value for config: {config_path}")
    click.echo(DEBUG_MESSAGES.get(debug, "Don't be crazy"))

    config = load_config(config_path)
    store = TodoStore(config.db_path)
    try:
        store.load()
    except OSError as e:
        logger.error(f"Could not read {store.path}: {e}")

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["store"] = store
    ctx.obj["console"] = get_themed_console(no_color=config.no_color)


@cli.command()
@click.argument("text", required=False)
@click.option("--todo", "-t", "todo_text", help="Todo text (alternative to TEXT)")
@click.pass_context
def add(ctx, text, todo_text):
    """Add a new todo."""
    text = text or todo_text
    if not text:
        raise click.UsageError("Provide the todo text as an argument or with --todo")

    store: TodoStore = ctx.obj["store"]
    store.add(text)
    render_grouped(store.todos, ctx.obj["console"])
    save_store(store)


@cli.command()
@click.argument("index", type=int)
@click.pass_context
def check(ctx, index):
    """Mark the todo at INDEX completed."""
    apply_at_index(ctx, index, TodoStore.mark_completed)


@cli.command()
@click.argument("index", type=int)
@click.pass_context
def uncheck(ctx, index):
    """Mark the todo at INDEX pending."""
    apply_at_index(ctx, index, TodoStore.unmark_completed)


@cli.command()
@click.argument("index", type=int)
@click.pass_context
def delete(ctx, index):
    """Delete the todo at INDEX."""
    apply_at_index(ctx, index, TodoStore.remove)


@cli.command("list")
@click.pass_context
def list_todos(ctx):
    """Show todos grouped by creation day."""
    render_grouped(ctx.obj["store"].todos, ctx.obj["console"])


@cli.command()
@click.pass_context
def ui(ctx):
    """Browse and toggle todos interactively."""
    from ..interactive import run_interactive

    store: TodoStore = ctx.obj["store"]
    config: ConfigModel = ctx.obj["config"]
    run_interactive(store.todos, config)
    save_store(store)


@cli.command("test")
@click.option("--list", "-l", "show_list", is_flag=True, help="Print testing lists")
def test_cmd(show_list):
    """Diagnostic echo; touches nothing."""
    if show_list:
        click.echo("Printing testing lists...")
    else:
        click.echo("Not printing testing lists...")


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
