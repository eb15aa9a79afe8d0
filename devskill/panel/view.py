"""Terminal rendering surface for a challenge panel."""

import logging
from typing import List, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from ..client.models import Problem
from .channel import MessageChannel
from .classifier import Tier, case_outcome, summarize
from .messages import Message, SubmissionResult, SubmitCode, Submitting


logger = logging.getLogger(__name__)


TIER_STYLES = {
    Tier.SUCCESS: "green",
    Tier.PARTIAL: "yellow",
    Tier.FAIL: "red",
}

TIER_LABELS = {
    Tier.SUCCESS: "✅ Passed",
    Tier.PARTIAL: "⚠ Partially passed",
    Tier.FAIL: "❌ Failed",
}


def format_case_color(line: str) -> str:
    """Format a per-test line with appropriate color."""
    if case_outcome(line).passed:
        return f"[green]{escape(line)}[/green]"
    return f"[red]{escape(line)}[/red]"


class TerminalPanel:
    """
    Renders a problem and submission results to a rich console.

    The submit trigger is enabled once a problem is shown, disabled as soon
    as a submission is requested, and enabled again when the result arrives.
    """

    def __init__(self, channel: MessageChannel, console: Optional[Console] = None):
        self.channel = channel
        self.console = console or Console()
        self.problem: Optional[Problem] = None
        self.trigger_enabled = False
        self.submitting = False
        self.results: List[SubmissionResult] = []
        self._subscription = channel.on_view_message(self._on_message)

    def show_problem(self, problem: Problem) -> None:
        self.problem = problem
        self.console.rule(f"[bold cyan]{escape(problem.title)}[/bold cyan]")
        self.console.print(Panel(Text(problem.description), title="Description"))
        self.console.print(
            "[bold]📝 How to work:[/bold]\n"
            "1. Copy the code template below into a new file.\n"
            "2. Write your solution following the description.\n"
            "3. Keep the file selected and submit it."
        )
        lexer = Syntax.guess_lexer("solution", code=problem.template)
        self.console.print(
            Panel(Syntax(problem.template, lexer, line_numbers=True), title="📋 Code template")
        )
        self.console.print(
            f"[bold cyan]Runtimes:[/bold cyan] {escape(', '.join(problem.runtimes))}"
        )
        self.trigger_enabled = True

    def show_load_error(self, error: Exception) -> None:
        self.console.rule("[bold red]Error[/bold red]")
        self.console.print(
            Panel(
                f"[red]❌ Could not load the challenge: {escape(str(error))}[/red]\n\n"
                "Make sure the evaluation service is running.",
                border_style="red",
            )
        )
        self.trigger_enabled = False

    def click_submit(self, runtime: Optional[str] = None) -> bool:
        """Request a submission; ignored while the trigger is disabled."""
        if not self.trigger_enabled:
            logger.debug("Submit trigger is disabled")
            return False
        self.trigger_enabled = False
        self.channel.post_to_controller(SubmitCode(runtime=runtime))
        return True

    @property
    def last_result(self) -> Optional[SubmissionResult]:
        return self.results[-1] if self.results else None

    def dispose(self) -> None:
        self.trigger_enabled = False
        self._subscription.dispose()

    def _on_message(self, message: Message) -> None:
        if isinstance(message, Submitting):
            self.submitting = True
            self.console.print("[italic]Submitting...[/italic]")
        elif isinstance(message, SubmissionResult):
            self.submitting = False
            self.results.append(message)
            self.trigger_enabled = self.problem is not None
            self.render_result(message)
        else:
            logger.debug("View ignoring %s", message.command)

    def render_result(self, message: SubmissionResult) -> None:
        outcome = message.result
        style = TIER_STYLES[message.tier]
        header = TIER_LABELS[message.tier]
        if outcome.success:
            header += f" [bold]{outcome.score}/100[/bold]"
        body = f"[{style}]{header}[/{style}]"
        if outcome.message:
            body += f"\n{escape(outcome.message)}"
        self.console.print(Panel(body, border_style=style))

        if outcome.test_results:
            passed, total = summarize(outcome)
            table = Table(
                title=f"Tests: {passed}/{total} passed",
                show_header=True,
                header_style="bold magenta",
            )
            table.add_column("#", style="cyan")
            table.add_column("Result", style="white")
            for idx, line in enumerate(outcome.test_results, 1):
                table.add_row(str(idx), format_case_color(line))
            self.console.print(table)

        if outcome.execution_log:
            self.console.print(Panel(Text(outcome.execution_log), title="Execution log"))
        if outcome.ai_review:
            self.console.print(Panel(Markdown(outcome.ai_review), title="Review"))
