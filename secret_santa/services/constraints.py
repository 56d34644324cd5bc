from __future__ import annotations

from typing import FrozenSet, Iterable, Optional, Sequence, Set

from secret_santa.domain import ConstraintSet, Vertex


class ConstraintValidator:
    """Answers whether a giver may be assigned to a receiver.

    Exclusions are checked before forced assignments, so an edge that is
    both excluded and forced is rejected.
    """

    def __init__(self, constraints: Optional[ConstraintSet] = None) -> None:
        constraints = constraints or ConstraintSet.build()
        self._exclusions = constraints.exclusions
        self._forced = constraints.forced

    def is_valid_move(self, giver: Vertex, receiver: Vertex) -> bool:
        if receiver.label in self._exclusions.get(giver.label, ()):
            return False
        target = self._forced.get(giver.label)
        if target is not None and target != receiver.label:
            return False
        return True

    def filter_valid_targets(self, giver: Vertex, candidates: Iterable[Vertex]) -> Set[Vertex]:
        return {candidate for candidate in candidates if self.is_valid_move(giver, candidate)}

    def forced_target(self, vertex: Vertex) -> Optional[str]:
        return self._forced.get(vertex.label)

    def has_forced_target(self, vertex: Vertex) -> bool:
        return vertex.label in self._forced

    def exclusions_for(self, label: str) -> FrozenSet[str]:
        return frozenset(self._exclusions.get(label, ()))

    def can_satisfy_remaining_cheats(self, remaining: Iterable[Vertex]) -> bool:
        # Necessary condition only: every forced giver still in play needs its target in play.
        labels = {vertex.label for vertex in remaining}
        for label in labels:
            target = self._forced.get(label)
            if target is not None and target not in labels:
                return False
        return True

    def validate_complete_path(self, path: Sequence[Vertex]) -> bool:
        for index, giver in enumerate(path):
            receiver = path[(index + 1) % len(path)]
            if not self.is_valid_move(giver, receiver):
                return False
        return True
