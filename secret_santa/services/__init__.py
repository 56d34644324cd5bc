from secret_santa.services.assignment import AssignmentError, generate_pairs
from secret_santa.services.constraints import ConstraintValidator
from secret_santa.services.tour import TourState

__all__ = ["AssignmentError", "generate_pairs", "ConstraintValidator", "TourState"]
