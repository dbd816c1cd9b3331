from .errors import ConfigurationError
from .letters import is_possible
from .scoring import points_for
from .state import RoundState, start_round
from .validation import SubmissionResult, Verdict, apply, validate

__all__ = [
    "ConfigurationError",
    "is_possible",
    "points_for",
    "RoundState",
    "start_round",
    "SubmissionResult",
    "Verdict",
    "apply",
    "validate",
]
