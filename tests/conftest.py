"""Shared fakes for the devskill test suite."""

import io
import json

import pytest
from rich.console import Console

from devskill.client import EvaluatorClient, Problem
from devskill.panel import FileDocumentSource, MessageChannel


BASE_URL = "http://evaluator.test"


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body

    def json(self):
        if isinstance(self._body, str):
            return json.loads(self._body)
        return self._body


class FakeSession:
    """
    Routes requests to canned responses.
    A route value may be a FakeResponse, an exception to raise, or a
    callable taking the request kwargs and returning either.
    """

    def __init__(self):
        self.routes = {}
        self.calls = []

    def route(self, method, path, value):
        self.routes[(method, BASE_URL + path)] = value

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        value = self.routes.get((method, url))
        if value is None:
            return FakeResponse(404, {"detail": "Not Found"})
        if callable(value) and not isinstance(value, FakeResponse):
            value = value(kwargs)
        if isinstance(value, Exception):
            raise value
        return value

    def posted(self):
        return [kwargs["json"] for method, url, kwargs in self.calls if method == "POST"]


class RecordingNotifier:
    def __init__(self):
        self.notices = []

    def info(self, message):
        self.notices.append(("info", message))

    def warning(self, message):
        self.notices.append(("warning", message))

    def error(self, message):
        self.notices.append(("error", message))

    def levels(self):
        return [level for level, _ in self.notices]


PROBLEM_BODY = {
    "id": "1",
    "title": "Add two numbers",
    "description": "Return the sum of a and b.",
    "template": "function add(a, b) {\n  // your code\n}",
}


@pytest.fixture
def session():
    s = FakeSession()
    s.route("GET", "/problem/1", FakeResponse(200, PROBLEM_BODY))
    return s


@pytest.fixture
def client(session):
    return EvaluatorClient(BASE_URL + "/", session=session)


@pytest.fixture
def problem():
    return Problem(
        problem_id="1",
        title="Add two numbers",
        description="Return the sum of a and b.",
        template="function add(a, b) {}",
    )


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def channel():
    return MessageChannel()


@pytest.fixture
def view_messages(channel):
    received = []
    channel.on_view_message(received.append)
    return received


@pytest.fixture
def solution(tmp_path):
    path = tmp_path / "solution.js"
    path.write_text("function add(a,b){return a+b}", encoding="utf-8")
    return path


@pytest.fixture
def documents(solution):
    return FileDocumentSource(solution)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None)


def graded(success=True, score=100, message="All tests passed", **extra):
    body = {"success": success, "score": score, "message": message, "test_results": []}
    body.update(extra)
    return FakeResponse(200, body)
