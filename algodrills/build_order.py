"""Ordering projects so that each is built after its dependencies."""

from __future__ import annotations

from enum import Enum, auto
from typing import Hashable, Iterable


class Status(Enum):
    """Build progress of a project."""

    RAW = auto()
    BUILDING = auto()
    BUILT = auto()


class CycleError(Exception):
    """Raised when the dependencies form a cycle and no build order exists."""


def build_order(
    projects: Iterable[Hashable],
    dependencies: Iterable[tuple[Hashable, Hashable]],
) -> list[Hashable]:
    """Return an order in which every project follows its dependencies.

    Each dependency pair ``(first, second)`` means ``second`` depends on
    ``first``. Projects named only in dependencies are included too.
    Raises :class:`CycleError` when no order exists.
    """
    graph: dict[Hashable, list[Hashable]] = {project: [] for project in projects}
    for first, second in dependencies:
        graph.setdefault(second, []).append(first)
        graph.setdefault(first, [])

    status = {project: Status.RAW for project in graph}
    order: list[Hashable] = []

    def visit(project: Hashable) -> None:
        state = status[project]
        if state is Status.BUILDING:
            raise CycleError(f"dependency cycle through {project!r}")
        if state is Status.BUILT:
            return
        status[project] = Status.BUILDING
        for dependency in graph[project]:
            visit(dependency)
        status[project] = Status.BUILT
        order.append(project)

    for project in graph:
        visit(project)
    return order