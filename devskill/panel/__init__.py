"""Challenge panel: submission lifecycle and its message protocol."""

from .channel import MessageChannel, Subscription
from .classifier import CaseOutcome, Tier, case_outcome, classify, summarize
from .controller import SubmissionController, SubmissionState
from .document import DocumentSource, FileDocumentSource
from .messages import SubmissionResult, SubmitCode, Submitting, parse_message, to_wire
from .panel import ChallengePanel
from .view import TerminalPanel

__all__ = [
    "MessageChannel",
    "Subscription",
    "CaseOutcome",
    "Tier",
    "case_outcome",
    "classify",
    "summarize",
    "SubmissionController",
    "SubmissionState",
    "DocumentSource",
    "FileDocumentSource",
    "SubmissionResult",
    "SubmitCode",
    "Submitting",
    "parse_message",
    "to_wire",
    "ChallengePanel",
    "TerminalPanel",
]
