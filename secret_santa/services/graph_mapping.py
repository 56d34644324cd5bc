from __future__ import annotations

from typing import Dict, List

from secret_santa.domain import ConstraintSet, Graph, SecretSantaRequest


def participants(request: SecretSantaRequest) -> List[str]:
    return list(dict.fromkeys(request.emails))


def _successors(request: SecretSantaRequest, giver: str, everyone: List[str]) -> List[str]:
    cheat = request.cheats.get(giver)
    if cheat is not None:
        return [cheat]
    excluded = set(request.exclusions.get(giver, ()))
    return [receiver for receiver in everyone if receiver != giver and receiver not in excluded]


def build_graph(request: SecretSantaRequest) -> Graph:
    everyone = participants(request)
    adjacency: Dict[str, List[str]] = {
        giver: _successors(request, giver, everyone) for giver in everyone
    }
    return Graph.from_labels(adjacency)


def build_constraints(request: SecretSantaRequest) -> ConstraintSet:
    return ConstraintSet.build(exclusions=request.exclusions, cheats=request.cheats)
