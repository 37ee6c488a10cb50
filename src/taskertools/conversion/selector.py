from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from taskertools.conversion.loader import ROOT_ELEMENT
from taskertools.conversion.models import Task, as_sequence

TASK_ELEMENT = "Task"


def task_collection(tree: Mapping[str, Any]) -> Any:
    """Return the raw ``TaskerData/Task`` entry: None, one mapping, or a list."""
    root = tree.get(ROOT_ELEMENT)
    if not isinstance(root, Mapping):
        return None
    return root.get(TASK_ELEMENT)


def select_tasks(collection: Any) -> list[Task]:
    """Tasks that carry a ``pc`` description key, in document order."""
    tasks = [Task.from_node(node) for node in as_sequence(collection)]
    return [task for task in tasks if task.has_description]
