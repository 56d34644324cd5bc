from secret_santa.domain.models import (
    ConstraintSet,
    Graph,
    GraphError,
    Pair,
    SecretSantaRequest,
    Vertex,
)

__all__ = [
    "ConstraintSet",
    "Graph",
    "GraphError",
    "Pair",
    "SecretSantaRequest",
    "Vertex",
]
