"""Graph algorithms: grid components and prerequisite ordering."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

_LAND = "1"


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of ``"1"`` cells joined horizontally or vertically."""
    if not grid:
        raise ValueError("grid must have at least one row")
    rows, cols = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = set()
    islands = 0
    for row in range(rows):
        for col in range(cols):
            if grid[row][col] != _LAND or (row, col) in seen:
                continue
            islands += 1
            seen.add((row, col))
            pending = deque([(row, col)])
            while pending:
                r, c = pending.popleft()
                for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and grid[nr][nc] == _LAND
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        pending.append((nr, nc))
    return islands


def _course_order(
    num_courses: int, prerequisites: Iterable[Sequence[int]]
) -> list[int] | None:
    """Return courses so that each follows its prerequisites, or None on a cycle."""
    requires: defaultdict[int, list[int]] = defaultdict(list)
    for pair in prerequisites:
        course, required = pair[0], pair[1]
        requires[course].append(required)

    order: list[int] = []
    done: set[int] = set()
    for start in range(num_courses):
        if start in done:
            continue
        on_path = {start}
        stack = [(start, iter(requires.get(start, ())))]
        while stack:
            node, pending = stack[-1]
            for required in pending:
                if required in on_path:
                    return None
                if required not in done:
                    on_path.add(required)
                    stack.append((required, iter(requires.get(required, ()))))
                    break
            else:
                stack.pop()
                on_path.discard(node)
                done.add(node)
                order.append(node)
    return order


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return whether every course can be taken; pairs are ``[course, required]``."""
    return _course_order(num_courses, prerequisites) is not None


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order taking each required course first, or ``[]`` on a cycle."""
    order = _course_order(num_courses, prerequisites)
    return order if order is not None else []