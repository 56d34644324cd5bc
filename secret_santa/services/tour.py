from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Set

from secret_santa.domain import Vertex


class TourState:
    """Path built so far by one search attempt, plus its visited set.

    The start vertex is fixed for the lifetime of the state and is never
    removed. ``add_vertex`` does no validation; callers check the move first.
    """

    def __init__(self, start: Vertex) -> None:
        self._start = start
        self._path: List[Vertex] = [start]
        self._visited: Set[Vertex] = {start}

    def copy(self) -> "TourState":
        clone = TourState(self._start)
        clone._path = list(self._path)
        clone._visited = set(self._visited)
        return clone

    def add_vertex(self, vertex: Vertex) -> None:
        self._path.append(vertex)
        self._visited.add(vertex)

    def remove_last_vertex(self) -> None:
        if len(self._path) > 1:
            self._visited.discard(self._path.pop())

    @contextmanager
    def visiting(self, vertex: Vertex) -> Iterator["TourState"]:
        self.add_vertex(vertex)
        try:
            yield self
        finally:
            self.remove_last_vertex()

    def current_vertex(self) -> Vertex:
        return self._path[-1]

    def is_visited(self, vertex: Vertex) -> bool:
        return vertex in self._visited

    def is_complete(self, total_vertices: int) -> bool:
        return len(self._path) == total_vertices

    def can_complete_cycle(self, possible_successors: Iterable[Vertex]) -> bool:
        return self._start in possible_successors

    @property
    def start_vertex(self) -> Vertex:
        return self._start

    @property
    def path(self) -> List[Vertex]:
        return list(self._path)

    @property
    def visited(self) -> Set[Vertex]:
        return set(self._visited)

    @property
    def path_size(self) -> int:
        return len(self._path)

    def __repr__(self) -> str:
        labels = " -> ".join(vertex.label for vertex in self._path)
        return f"TourState(start={self._start.label!r}, path=[{labels}])"
