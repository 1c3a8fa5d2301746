"""Rich markup rendering of tasks"""
from core.models import Task, TaskStatus
from core.tags import highlight_tags

PRIORITY_COLORS = {
    1: "green",
    2: "cyan",
    3: "yellow",
    4: "magenta",
    5: "red",
}
DEFAULT_COLOR = "blue"

STATUS_ICONS = {
    TaskStatus.COMPLETED: ("✓", "green"),
    TaskStatus.IN_PROGRESS: ("▶", "cyan"),
    TaskStatus.NOT_STARTED: ("✕", "red"),
}

DESC_INDENT = 5


def id_width(max_id: int) -> int:
    """Column width for ids up to max_id, including the '#' marker"""
    return len(str(max(max_id, 0))) + 1


def colored_id(task: Task, width: int = 0) -> str:
    color = PRIORITY_COLORS.get(task.priority, DEFAULT_COLOR)
    label = f"#{task.id}".rjust(width)
    return f"[bold {color}]{label}[/bold {color}]"


def status_icon(task: Task) -> str:
    icon, color = STATUS_ICONS[task.status]
    return f"[bold {color}]{icon}[/bold {color}]"


def format_task(task: Task, width: int = 0) -> str:
    """One-line task: id | status title"""
    return f"{colored_id(task, width)} | {status_icon(task)} {highlight_tags(task.title)}"


def format_description(task: Task, width: int = 0) -> str:
    """Description line, indented under the title"""
    return " " * (width + DESC_INDENT) + highlight_tags(task.desc)
