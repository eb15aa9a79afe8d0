"""A challenge panel: one problem, one controller, one rendering surface."""

import logging
from typing import Optional

from rich.console import Console

from ..client.client import EvaluatorClient
from ..client.errors import DevSkillError
from ..client.models import Problem
from .channel import MessageChannel
from .controller import SubmissionController
from .document import DocumentSource
from .messages import SubmissionResult
from .view import TerminalPanel


logger = logging.getLogger(__name__)


class ChallengePanel:
    """Wires the problem catalog, controller and terminal view together."""

    def __init__(
        self,
        client: EvaluatorClient,
        documents: DocumentSource,
        notifier,
        console: Optional[Console] = None,
        runtime: Optional[str] = None,
    ):
        self.client = client
        self.documents = documents
        self.notifier = notifier
        self.runtime = runtime
        self.channel = MessageChannel()
        self.view = TerminalPanel(self.channel, console)
        self.controller: Optional[SubmissionController] = None
        self.problem: Optional[Problem] = None
        self.load_error: Optional[DevSkillError] = None

    @classmethod
    def open(cls, problem_id: str, client: EvaluatorClient, documents: DocumentSource, notifier, **kwargs) -> "ChallengePanel":
        """Create a panel and load the given problem into it."""
        panel = cls(client, documents, notifier, **kwargs)
        panel.load(problem_id)
        return panel

    def load(self, problem_id: str) -> bool:
        """Fetch and show a problem. Returns False if it could not be loaded."""
        try:
            problem = self.client.fetch_problem(problem_id)
        except DevSkillError as e:
            logger.debug("Loading problem %s failed", problem_id, exc_info=True)
            self.load_error = e
            self.view.show_load_error(e)
            self.notifier.error(str(e))
            return False

        if self.controller is not None:
            self.controller.dispose()
        self.problem = problem
        self.load_error = None
        self.controller = SubmissionController(
            problem,
            self.client,
            self.documents,
            self.channel,
            self.notifier,
            runtime=self.runtime,
        )
        self.view.show_problem(problem)
        return True

    @property
    def loaded(self) -> bool:
        return self.problem is not None

    def submit(self, runtime: Optional[str] = None) -> Optional[SubmissionResult]:
        """Press the panel's submit trigger; returns the result of the cycle."""
        before = len(self.view.results)
        if not self.view.click_submit(runtime):
            return None
        if len(self.view.results) == before:
            return None
        return self.view.last_result

    def dispose(self) -> None:
        if self.controller is not None:
            self.controller.dispose()
        self.view.dispose()
        self.channel.dispose()

    def __enter__(self) -> "ChallengePanel":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()
