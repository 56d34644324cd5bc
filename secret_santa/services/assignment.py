from __future__ import annotations

import time
from typing import List, Optional, Sequence, Set

from loguru import logger

from secret_santa.domain import ConstraintSet, Graph, Pair, Vertex
from secret_santa.services.constraints import ConstraintValidator
from secret_santa.services.tour import TourState


class AssignmentError(RuntimeError):
    pass


def _deadline_passed(deadline: Optional[float]) -> bool:
    return deadline is not None and time.monotonic() >= deadline


def _search(
    state: TourState,
    graph: Graph,
    validator: ConstraintValidator,
    deadline: Optional[float],
) -> Optional[List[Vertex]]:
    if _deadline_passed(deadline):
        return None

    current = state.current_vertex()
    successors = graph.successors(current)

    if state.is_complete(len(graph)):
        if state.can_complete_cycle(validator.filter_valid_targets(current, successors)):
            return state.path
        return None

    remaining = {vertex for vertex in graph if not state.is_visited(vertex)}
    for candidate in successors:
        if state.is_visited(candidate) or not validator.is_valid_move(current, candidate):
            continue
        if not validator.can_satisfy_remaining_cheats(remaining - {candidate}):
            continue
        with state.visiting(candidate):
            found = _search(state, graph, validator, deadline)
        if found is not None:
            return found
    return None


def _cycle_to_pairs(cycle: Sequence[Vertex]) -> List[Pair]:
    return [
        Pair(giver.label, cycle[(index + 1) % len(cycle)].label)
        for index, giver in enumerate(cycle)
    ]


def find_hamiltonian_cycle(
    graph: Graph,
    validator: ConstraintValidator,
    deadline: Optional[float] = None,
) -> Optional[List[Pair]]:
    """Return the first constrained Hamiltonian cycle as pairs, or None.

    Start vertices are tried in graph order and successors in adjacency
    order, so the result is deterministic for a given graph and constraint
    set. A passed ``deadline`` (``time.monotonic()`` value) makes every
    remaining branch fail.
    """
    for start in graph:
        cycle = _search(TourState(start), graph, validator, deadline)
        if cycle is not None:
            logger.bind(start=start.label, size=len(cycle)).info("Hamiltonian cycle found")
            return _cycle_to_pairs(cycle)
        if _deadline_passed(deadline):
            logger.bind(start=start.label).warning("Search deadline reached before a cycle was found")
            break
    return None


def best_effort_assignment(graph: Graph, validator: ConstraintValidator) -> List[Pair]:
    """Greedy partial assignment used when no full cycle exists.

    Each giver takes its first valid successor that nobody else has taken.
    Givers left without one are skipped; there is no backtracking.
    """
    pairs: List[Pair] = []
    givers: Set[Vertex] = set()
    used_receivers: Set[Vertex] = set()
    for giver in graph:
        if giver in givers:
            continue
        for receiver in graph.successors(giver):
            if receiver in used_receivers or not validator.is_valid_move(giver, receiver):
                continue
            pairs.append(Pair(giver.label, receiver.label))
            givers.add(giver)
            used_receivers.add(receiver)
            break

    logger.bind(pairs=len(pairs), participants=len(graph)).info("Fallback assignment created")
    return pairs


def is_complete_cycle(pairs: Sequence[Pair], graph: Graph) -> bool:
    if not pairs or len(pairs) != len(graph):
        return False
    links = dict(pairs)
    if len(links) != len(pairs) or set(links) != set(graph.labels()):
        return False

    start = pairs[0].giver
    current = start
    seen: Set[str] = set()
    while current not in seen:
        seen.add(current)
        current = links.get(current)
        if current is None:
            return False
    return current == start and len(seen) == len(graph)


def generate_pairs(
    graph: Optional[Graph],
    constraints: Optional[ConstraintSet] = None,
    timeout: Optional[float] = None,
) -> List[Pair]:
    if graph is None:
        raise AssignmentError("A participant graph is required to generate assignments.")

    validator = ConstraintValidator(constraints)
    deadline = time.monotonic() + timeout if timeout is not None else None

    pairs = find_hamiltonian_cycle(graph, validator, deadline)
    if pairs is not None:
        return pairs

    if len(graph):
        logger.bind(participants=len(graph)).warning(
            "No valid Hamiltonian cycle found, attempting fallback strategy"
        )
    return best_effort_assignment(graph, validator)
