"""HTTP client for the DevSkill evaluation service."""

import logging
from typing import Any, Optional

import requests

from .errors import MalformedResponse, NetworkError, NotFound, ServerError
from .models import DEFAULT_RUNTIMES, GradingOutcome, Problem, Submission


logger = logging.getLogger(__name__)


class EvaluatorClient:
    """HTTP client for fetching challenges and submitting solutions."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        """Initialize the client against the given service address."""
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        """Send a request, translating transport failures into NetworkError."""
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise NetworkError(f"Could not reach {self.base_url}: {e}") from e
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    @staticmethod
    def _json(response: requests.Response) -> dict:
        """Decode a JSON object body."""
        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponse(f"Response is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise MalformedResponse("Response body is not a JSON object")
        return data

    @staticmethod
    def _check_status(response: requests.Response) -> None:
        if not 200 <= response.status_code < 300:
            raise ServerError(response.status_code)

    def fetch_problem(self, problem_id: str) -> Problem:
        """Retrieve a challenge definition by id."""
        response = self._request("GET", f"/problem/{problem_id}")
        if response.status_code == 404:
            raise NotFound(problem_id)
        self._check_status(response)
        return parse_problem(self._json(response), problem_id)

    def submit(self, submission: Submission) -> GradingOutcome:
        """Submit a solution and return its grading outcome."""
        response = self._request("POST", "/submit", json=submission.to_payload())
        self._check_status(response)
        return parse_outcome(self._json(response))


def _require_str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise MalformedResponse(f"Field '{key}' is missing or not a string")
    return value


def _optional_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedResponse(f"Field '{key}' is not a string")
    return value


def parse_problem(data: dict, requested_id: str) -> Problem:
    """Build a Problem from a /problem/{id} payload."""
    raw_id = data.get("id", requested_id)
    runtimes: Any = data.get("runtimes") or DEFAULT_RUNTIMES
    if not isinstance(runtimes, (list, tuple)) or not all(
        isinstance(r, str) for r in runtimes
    ):
        raise MalformedResponse("Field 'runtimes' must be a list of strings")

    return Problem(
        problem_id=str(raw_id),
        title=_require_str(data, "title"),
        description=_require_str(data, "description"),
        template=_require_str(data, "template"),
        runtimes=tuple(runtimes),
    )


def parse_outcome(data: dict) -> GradingOutcome:
    """Build a GradingOutcome from a /submit payload."""
    success = data.get("success")
    if not isinstance(success, bool):
        raise MalformedResponse("Field 'success' is missing or not a boolean")

    # Score only means something for a successful run
    score = data.get("score") if success else 0
    # bool is an int subclass
    if isinstance(score, bool) or not isinstance(score, int):
        raise MalformedResponse("Field 'score' is missing or not an integer")
    if not 0 <= score <= 100:
        raise MalformedResponse(f"Score {score} is outside 0-100")

    test_results = data.get("test_results") or []
    if not isinstance(test_results, list):
        raise MalformedResponse("Field 'test_results' is not a list")

    return GradingOutcome(
        success=success,
        score=score,
        message=str(data.get("message") or ""),
        test_results=tuple(str(line) for line in test_results),
        execution_log=_optional_str(data, "execution_log"),
        ai_review=_optional_str(data, "ai_review"),
    )
