"""Data models for evaluation service entities."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


DEFAULT_RUNTIMES = ("default", "alt-engine-1", "alt-engine-2")


@dataclass(frozen=True)
class Problem:
    """Represents a coding challenge."""

    problem_id: str
    title: str
    description: str
    template: str
    runtimes: Tuple[str, ...] = DEFAULT_RUNTIMES

    @property
    def default_runtime(self) -> str:
        return self.runtimes[0]


@dataclass(frozen=True)
class Submission:
    """Represents one solution submission."""

    problem_id: str
    code: str
    runtime: str

    def to_payload(self) -> dict:
        return {"problem_id": self.problem_id, "code": self.code, "runtime": self.runtime}


@dataclass(frozen=True)
class GradingOutcome:
    """
    Result of grading one submission.
    Score is only meaningful when success is true.
    """

    success: bool
    score: int = 0
    message: str = ""
    test_results: Tuple[str, ...] = field(default_factory=tuple)
    execution_log: Optional[str] = None
    ai_review: Optional[str] = None

    @classmethod
    def failure(cls, message: str) -> "GradingOutcome":
        """Synthetic outcome for a cycle that never got a grading result."""
        return cls(success=False, score=0, message=message)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "score": self.score,
            "message": self.message,
            "test_results": list(self.test_results),
            "execution_log": self.execution_log,
            "ai_review": self.ai_review,
        }


@dataclass(frozen=True)
class Document:
    """Text captured from the active solution file."""

    path: str
    text: str
