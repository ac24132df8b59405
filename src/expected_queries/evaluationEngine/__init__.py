from .classifier import classify
from .core import check, evaluate
from .models import ClassifiedQuery, OperationTally, Outcome, Verdict
from .querylog import QueryLog

__all__ = [
    "ClassifiedQuery",
    "OperationTally",
    "Outcome",
    "QueryLog",
    "Verdict",
    "check",
    "classify",
    "evaluate",
]
