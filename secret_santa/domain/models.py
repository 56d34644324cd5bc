from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, NamedTuple, Optional, Tuple


class GraphError(ValueError):
    pass


@dataclass(frozen=True)
class Vertex:
    label: str

    def __str__(self) -> str:
        return self.label


class Pair(NamedTuple):
    giver: str
    receiver: str


class Graph:
    """Directed compatibility graph: each vertex maps to the ordered
    successors it may give to.

    Vertex order and successor order are the insertion order of the
    mapping the graph was built from. The graph never changes after
    construction; ``without_receiver`` returns a new graph.
    """

    def __init__(self, adjacency: Mapping[Vertex, Iterable[Vertex]]) -> None:
        frozen: Dict[Vertex, Tuple[Vertex, ...]] = {
            vertex: tuple(successors) for vertex, successors in adjacency.items()
        }
        for vertex, successors in frozen.items():
            for successor in successors:
                if successor not in frozen:
                    raise GraphError(
                        f"{vertex.label} points to {successor.label}, which is not a participant."
                    )
        self._adjacency = MappingProxyType(frozen)

    @classmethod
    def from_labels(cls, adjacency: Mapping[str, Iterable[str]]) -> "Graph":
        return cls(
            {
                Vertex(label): [Vertex(successor) for successor in successors]
                for label, successors in adjacency.items()
            }
        )

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._adjacency)

    def labels(self) -> List[str]:
        return [vertex.label for vertex in self._adjacency]

    def successors(self, vertex: Vertex) -> Tuple[Vertex, ...]:
        return self._adjacency.get(vertex, ())

    def without_receiver(self, label: str) -> "Graph":
        removed = Vertex(label)
        return Graph(
            {
                vertex: [successor for successor in successors if successor != removed]
                for vertex, successors in self._adjacency.items()
            }
        )

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return dict(self._adjacency) == dict(other._adjacency)

    def __repr__(self) -> str:
        edges = {vertex.label: [s.label for s in successors] for vertex, successors in self._adjacency.items()}
        return f"Graph({edges!r})"


def _frozen_exclusions(exclusions: Optional[Mapping[str, Iterable[str]]]) -> Mapping[str, frozenset]:
    return MappingProxyType(
        {giver: frozenset(receivers) for giver, receivers in (exclusions or {}).items()}
    )


@dataclass(frozen=True)
class ConstraintSet:
    exclusions: Mapping[str, frozenset] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    forced: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "exclusions", _frozen_exclusions(self.exclusions))
        object.__setattr__(self, "forced", MappingProxyType(dict(self.forced or {})))

    @classmethod
    def build(
        cls,
        exclusions: Optional[Mapping[str, Iterable[str]]] = None,
        cheats: Optional[Mapping[str, str]] = None,
    ) -> "ConstraintSet":
        return cls(exclusions=exclusions or {}, forced=cheats or {})


def _string_list(value, name: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{name} must be a list of strings.")
    return list(value)


def _string_map(value, name: str) -> Dict[str, str]:
    if not isinstance(value, Mapping) or not all(isinstance(item, str) for item in value.values()):
        raise ValueError(f"{name} must map participants to strings.")
    return dict(value)


@dataclass(frozen=True)
class SecretSantaRequest:
    emails: List[str]
    exclusions: Dict[str, List[str]] = field(default_factory=dict)
    cheats: Dict[str, str] = field(default_factory=dict)
    mappings: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping) -> "SecretSantaRequest":
        if not isinstance(data, Mapping):
            raise ValueError("Request must be a JSON object.")

        exclusions = data.get("exclusions") or {}
        if not isinstance(exclusions, Mapping):
            raise ValueError("exclusions must map participants to lists.")

        return cls(
            emails=_string_list(data.get("emails") or [], "emails"),
            exclusions={
                giver: _string_list(receivers, f"exclusions[{giver!r}]")
                for giver, receivers in exclusions.items()
            },
            cheats=_string_map(data.get("cheats") or {}, "cheats"),
            mappings=_string_map(data.get("mappings") or {}, "mappings"),
        )
