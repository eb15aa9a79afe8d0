"""Error taxonomy for challenge retrieval and submission."""


class DevSkillError(Exception):
    """Base class for every recoverable devskill error."""


class CaptureError(DevSkillError):
    """Raised before any network call when the solution cannot be captured."""


class NoActiveDocument(CaptureError):
    def __init__(self, message: str = "No solution file is open. Open the file with your code first."):
        super().__init__(message)


class EmptyCode(CaptureError):
    def __init__(self, message: str = "The solution file is empty."):
        super().__init__(message)


class NetworkError(DevSkillError):
    """Transport-level failure talking to the evaluation service."""


class ServerError(DevSkillError):
    """The evaluation service answered with a non-success HTTP status."""

    def __init__(self, status: int, message: str = ""):
        self.status = status
        super().__init__(message or f"Server responded with status {status}")


class NotFound(DevSkillError):
    """The evaluation service has no challenge with the requested id."""

    def __init__(self, problem_id: str):
        self.problem_id = problem_id
        super().__init__(f"Problem {problem_id} not found")


class MalformedResponse(DevSkillError):
    """The payload could not be turned into a Problem or GradingOutcome."""
