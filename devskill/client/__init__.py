"""Client module for evaluation service interaction."""

from .client import EvaluatorClient
from .errors import (
    CaptureError,
    DevSkillError,
    EmptyCode,
    MalformedResponse,
    NetworkError,
    NoActiveDocument,
    NotFound,
    ServerError,
)
from .models import DEFAULT_RUNTIMES, Document, GradingOutcome, Problem, Submission

__all__ = [
    "EvaluatorClient",
    "CaptureError",
    "DevSkillError",
    "EmptyCode",
    "MalformedResponse",
    "NetworkError",
    "NoActiveDocument",
    "NotFound",
    "ServerError",
    "DEFAULT_RUNTIMES",
    "Document",
    "GradingOutcome",
    "Problem",
    "Submission",
]
