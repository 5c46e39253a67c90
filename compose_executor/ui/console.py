"""Console UI for compose-executor."""
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.exceptions import ExecutorError, handle_executor_error
from ..core.operations import ExecutionResult, Outcome

APPLICATION_NAME = "docker-compose-executor"

# Participles used in result messages, keyed by operation text
_ACTIONS = {
    "start": "starting",
    "stop": "stopping",
    "restart": "restarting",
}


class ConsoleUI:
    """UI class for console output."""
    def __init__(self, console=None):
        self.console = console or Console()

    def print_banner(self, startup_seconds):
        """Print the application startup banner."""
        self.console.print(f"Starting the {APPLICATION_NAME} application...")
        self.console.print(f"This is the {APPLICATION_NAME} application!")
        self.console.print(f"Application started in: {startup_seconds * 1000:.3f}ms")

    def print_error(self, error, show_traceback=False):
        """Print error message."""
        if isinstance(error, ExecutorError):
            error_text = handle_executor_error(error)
        else:
            error_text = str(error)
        self.console.print(f"[red]Error:[/red] {escape(error_text)}")
        if show_traceback:
            self.console.print_exception()

    def print_result(self, result: ExecutionResult):
        """Print the outcome of an operation."""
        action = _ACTIONS.get(result.operation, result.operation)
        service = escape(result.service)

        if result.outcome is Outcome.SUCCEEDED:
            self.console.print(f"[green]success in {action} service:[/green] {service}")
        elif result.outcome is Outcome.UNKNOWN_OPERATION:
            self.console.print(f"[yellow]unknown operation was requested:[/yellow] {escape(result.operation)}")
        elif result.outcome is Outcome.UNKNOWN_SERVICE:
            self.console.print(f"[yellow]unknown service:[/yellow] {service}")
            self.console.print(f"[red]error {action} service:[/red] {service}")
        elif result.outcome is Outcome.COMMAND_FAILED:
            self.console.print(f"[red]error {action} service:[/red] {service} "
                               f"(exit status {result.returncode})")
            if result.output.strip():
                self.console.print(Panel(Text(result.output.strip()), title="associated output",
                                         border_style="red"))
        else:
            self.console.print(f"[red]error {action} service:[/red] {service} "
                               f"(container {escape(result.container)} not in expected state)")

    def display_services(self, registry):
        """Display the service table."""
        table = Table(title="Services")
        table.add_column("Service", style="cyan", no_wrap=True)
        table.add_column("Container", style="green")

        for service, container in sorted(registry.items()):
            table.add_row(escape(service), escape(container))

        self.console.print(table)
