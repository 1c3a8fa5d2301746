"""CLI interface for todo"""
import sys
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape

from config import Config
from core import __version__
from core.api import TodoAPI
from core.display import format_description, format_task, id_width
from core.errors import (
    ConfigurationError,
    InvalidTransitionError,
    PersistenceError,
    TaskNotFoundError,
    TodoError,
)
from core.storage import TaskStorage
from core.task_list import TaskFilter

console = Console()
err_console = Console(stderr=True)

# Exit codes
ERR_SAVE = 1
ERR_NO_TASK = 2
ERR_COMPLETE = 3
ERR_START = 4


def fail(error: TodoError, code: int) -> NoReturn:
    """Report an error on one line and exit"""
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    sys.exit(code)


def get_api() -> TodoAPI:
    try:
        path = Config.get_tasks_file()
    except ConfigurationError as e:
        fail(e, ERR_SAVE)
    return TodoAPI(TaskStorage(path))


def task_id_option(func):
    return click.option(
        '-t', '--task-id', 'task_id', type=int, required=True, help='Id of the task'
    )(func)


@click.group()
@click.version_option(__version__, prog_name='todo')
def cli():
    """Simple todo manager"""
    pass


@cli.command()
@click.option('-t', '--title', required=True, help='Title of the task')
@click.option('-p', '--priority', default=None, help='Priority of the task between 1-5 (default 3)')
@click.option('-d', '--desc', default='', help='Description of the task')
def add(title, priority, desc):
    """Add a new task"""
    if not title.strip():
        raise click.BadParameter('Title cannot be empty', param_hint="'--title'")

    api = get_api()
    try:
        task = api.add_task(title, desc, priority)
    except PersistenceError as e:
        fail(e, ERR_SAVE)

    console.print(f"Added task {format_task(task)}")


@cli.command()
@task_id_option
def remove(task_id):
    """Remove a task"""
    api = get_api()
    try:
        task = api.remove_task(task_id)
    except TaskNotFoundError as e:
        fail(e, ERR_NO_TASK)
    except PersistenceError as e:
        fail(e, ERR_SAVE)

    console.print(f"Removed task {format_task(task)}")


cli.add_command(remove, name='rm')


@cli.command()
@task_id_option
def start(task_id):
    """Start a task"""
    api = get_api()
    try:
        task = api.start_task(task_id)
    except TaskNotFoundError as e:
        fail(e, ERR_NO_TASK)
    except InvalidTransitionError as e:
        fail(e, ERR_START)
    except PersistenceError as e:
        fail(e, ERR_SAVE)

    console.print(f"Started task {format_task(task)}")


@cli.command()
@task_id_option
def complete(task_id):
    """Complete a task"""
    api = get_api()
    try:
        task = api.complete_task(task_id)
    except TaskNotFoundError as e:
        fail(e, ERR_NO_TASK)
    except InvalidTransitionError as e:
        fail(e, ERR_COMPLETE)
    except PersistenceError as e:
        fail(e, ERR_SAVE)

    console.print(f"Completed task {format_task(task)}")


@cli.command(name='list')
@click.option('-a', '--all', 'show_all', is_flag=True, help='Print all tasks')
@click.option('-d', '--done', is_flag=True, help='Print only completed tasks')
@click.option('-s', '--started', is_flag=True, help='Print only tasks which are in progress')
@click.option('-v', '--verbose', is_flag=True, help='Also print task descriptions')
def list_tasks(show_all, done, started, verbose):
    """List tasks"""
    task_list = get_api().load()
    tasks = task_list.select(TaskFilter(show_all=show_all, done=done, started=started))

    console.print()
    if not tasks:
        console.print("Nothing to do")
        return

    width = id_width(task_list.max_id)
    for task in tasks:
        console.print(f"\t{format_task(task, width)}")
        if verbose:
            console.print(f"\t{format_description(task, width)}")
        console.print()


cli.add_command(list_tasks, name='ls')
