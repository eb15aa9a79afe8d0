"""Messages exchanged between the submission controller and the panel."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..client.client import parse_outcome
from ..client.errors import MalformedResponse
from ..client.models import GradingOutcome
from .classifier import Tier, classify


logger = logging.getLogger(__name__)


SUBMIT_CODE = "submitCode"
SUBMITTING = "submitting"
SUBMISSION_RESULT = "submissionResult"


@dataclass(frozen=True)
class SubmitCode:
    """View -> controller: start a submission cycle."""

    runtime: Optional[str] = None

    command = SUBMIT_CODE


@dataclass(frozen=True)
class Submitting:
    """Controller -> view: the solution is on its way to the service."""

    command = SUBMITTING


@dataclass(frozen=True)
class SubmissionResult:
    """Controller -> view: terminal message of a cycle."""

    result: GradingOutcome
    tier: Tier

    command = SUBMISSION_RESULT

    @classmethod
    def of(cls, result: GradingOutcome) -> "SubmissionResult":
        return cls(result=result, tier=classify(result))


ViewMessage = Union[Submitting, SubmissionResult]
ControllerMessage = SubmitCode
Message = Union[SubmitCode, Submitting, SubmissionResult]


def to_wire(message: Message) -> dict:
    """Serialize a message to its dict form."""
    if isinstance(message, SubmitCode):
        return {"command": SUBMIT_CODE, "runtime": message.runtime}
    elif isinstance(message, Submitting):
        return {"command": SUBMITTING}
    elif isinstance(message, SubmissionResult):
        return {
            "command": SUBMISSION_RESULT,
            "result": message.result.to_dict(),
            "tier": message.tier.value,
        }
    raise TypeError(f"Not a panel message: {message!r}")


def parse_message(data: dict) -> Optional[Message]:
    """
    Parse a dict into a message.
    Unknown commands and malformed payloads yield None.
    """
    if not isinstance(data, dict):
        logger.debug("Ignoring non-object message: %r", data)
        return None

    command = data.get("command")
    if command == SUBMIT_CODE:
        runtime = data.get("runtime")
        if runtime is not None and not isinstance(runtime, str):
            logger.debug("Ignoring submitCode with runtime %r", runtime)
            return None
        return SubmitCode(runtime=runtime or None)
    elif command == SUBMITTING:
        return Submitting()
    elif command == SUBMISSION_RESULT:
        result = data.get("result")
        if not isinstance(result, dict):
            logger.debug("Ignoring submissionResult without result object")
            return None
        try:
            return SubmissionResult.of(parse_outcome(result))
        except MalformedResponse as e:
            logger.debug("Ignoring malformed submissionResult: %s", e)
            return None
    else:
        logger.debug("Ignoring unknown command %r", command)
        return None
