from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional

from loguru import logger

from secret_santa.core.config import Settings
from secret_santa.domain import Pair, SecretSantaRequest
from secret_santa.services.assignment import generate_pairs, is_complete_cycle
from secret_santa.services.graph_mapping import build_constraints, build_graph, participants


@dataclass(frozen=True)
class AssignmentResult:
    pairs: List[Pair]
    participants: List[str]
    complete: bool

    @property
    def unassigned_givers(self) -> List[str]:
        givers = {pair.giver for pair in self.pairs}
        return [label for label in self.participants if label not in givers]

    @property
    def unassigned_receivers(self) -> List[str]:
        receivers = {pair.receiver for pair in self.pairs}
        return [label for label in self.participants if label not in receivers]

    @property
    def summary(self) -> str:
        if self.complete:
            return f"Assigned all {len(self.participants)} participants in a single cycle."
        return (
            f"Partial assignment: {len(self.pairs)} of {len(self.participants)} participants "
            f"have a recipient."
        )


def format_participant(label: str, mappings: Optional[Mapping[str, str]] = None) -> str:
    name = (mappings or {}).get(label)
    if name:
        return f"{name} <{label}>"
    return label


def format_pair(pair: Pair, mappings: Optional[Mapping[str, str]] = None) -> str:
    return f"{format_participant(pair.giver, mappings)} -> {format_participant(pair.receiver, mappings)}"


def assign(request: SecretSantaRequest, settings: Optional[Settings] = None) -> AssignmentResult:
    graph = build_graph(request)
    constraints = build_constraints(request)
    timeout = settings.search_timeout_seconds if settings else None

    pairs = generate_pairs(graph, constraints, timeout=timeout)
    result = AssignmentResult(
        pairs=pairs,
        participants=participants(request),
        complete=is_complete_cycle(pairs, graph),
    )

    log = logger.bind(participants=len(result.participants), pairs=len(pairs))
    if result.complete:
        log.info("Assignments generated")
    else:
        log.warning(
            "Assignments incomplete; missing givers: {givers}",
            givers=", ".join(result.unassigned_givers) or "-",
        )
    return result
