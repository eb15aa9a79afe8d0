"""Submission lifecycle for one challenge panel."""

import logging
from enum import Enum
from typing import Optional

from ..client.client import EvaluatorClient
from ..client.errors import CaptureError, DevSkillError, EmptyCode, NoActiveDocument
from ..client.models import GradingOutcome, Problem, Submission
from .channel import MessageChannel
from .classifier import Tier
from .document import DocumentSource
from .messages import Message, SubmissionResult, SubmitCode, Submitting


logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    IDLE = "idle"
    CAPTURING = "capturing"
    SUBMITTING = "submitting"
    COMPLETED = "completed"
    FAILED = "failed"


BUSY_STATES = (SubmissionState.CAPTURING, SubmissionState.SUBMITTING)


class SubmissionController:
    """
    Runs capture -> submit -> classify -> publish cycles for one problem.

    At most one cycle is in flight at a time. A trigger that arrives while
    a cycle is capturing or submitting, including one delivered re-entrantly
    while the HTTP request is outstanding, is rejected without emitting
    anything. Every accepted cycle that reaches the service publishes exactly
    one Submitting followed by exactly one SubmissionResult. Capture failures
    publish only the SubmissionResult.
    """

    def __init__(
        self,
        problem: Problem,
        client: EvaluatorClient,
        documents: DocumentSource,
        channel: MessageChannel,
        notifier,
        runtime: Optional[str] = None,
    ):
        self.problem = problem
        self.client = client
        self.documents = documents
        self.channel = channel
        self.notifier = notifier
        self.runtime = runtime
        self.state = SubmissionState.IDLE
        self.last_result: Optional[SubmissionResult] = None
        self.disposed = False
        self._subscription = channel.on_controller_message(self.handle_message)

    @property
    def busy(self) -> bool:
        return self.state in BUSY_STATES

    def handle_message(self, message: Message) -> None:
        """Inbound listener for view -> controller messages."""
        if isinstance(message, SubmitCode):
            self.submit(message.runtime)
        else:
            logger.debug("Controller ignoring %s", message.command)

    def submit(self, runtime: Optional[str] = None) -> Optional[SubmissionResult]:
        """
        Run one submission cycle.
        Returns the published result, or None when the trigger was rejected.
        """
        if self.disposed:
            logger.warning("Submission ignored: panel is closed")
            return None
        if self.busy:
            logger.warning("Submission ignored: a submission is already %s", self.state.value)
            return None

        runtime = runtime or self.runtime or self.problem.default_runtime
        self._set_state(SubmissionState.CAPTURING)

        try:
            code = self._capture()
        except CaptureError as e:
            self._set_state(SubmissionState.FAILED)
            if isinstance(e, EmptyCode):
                self.notifier.warning(str(e))
            else:
                self.notifier.error(str(e))
            return self._publish(GradingOutcome.failure(str(e)))

        submission = Submission(
            problem_id=self.problem.problem_id, code=code, runtime=runtime
        )
        self._set_state(SubmissionState.SUBMITTING)
        self.channel.post_to_view(Submitting())

        try:
            outcome = self.client.submit(submission)
        except DevSkillError as e:
            logger.debug("Submission failed", exc_info=True)
            self._set_state(SubmissionState.FAILED)
            self.notifier.error(f"Submission failed: {e}")
            return self._publish(GradingOutcome.failure(str(e)))

        self._set_state(SubmissionState.COMPLETED)
        result = self._publish(outcome)
        self._notify(result)
        return result

    def dispose(self) -> None:
        """Stop listening to the channel; later triggers are rejected."""
        self.disposed = True
        self._subscription.dispose()

    def _capture(self) -> str:
        """Snapshot the active document's text, read exactly once."""
        document = self.documents.active_document()
        if document is None:
            raise NoActiveDocument()
        code = document.text
        if not code.strip():
            raise EmptyCode()
        logger.debug("Captured %d characters from %s", len(code), document.path)
        return code

    def _publish(self, outcome: GradingOutcome) -> SubmissionResult:
        result = SubmissionResult.of(outcome)
        self.last_result = result
        self.channel.post_to_view(result)
        return result

    def _notify(self, result: SubmissionResult) -> None:
        outcome = result.result
        if result.tier == Tier.SUCCESS:
            self.notifier.info(outcome.message or "All tests passed")
        elif result.tier == Tier.PARTIAL:
            self.notifier.warning(f"Score {outcome.score}/100: {outcome.message}")
        else:
            self.notifier.error(outcome.message or "Submission failed")

    def _set_state(self, state: SubmissionState) -> None:
        logger.debug("%s -> %s", self.state.value, state.value)
        self.state = state
