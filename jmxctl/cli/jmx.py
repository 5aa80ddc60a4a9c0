"""JMX commands registered on the top-level app."""

import typer

from jmxctl.api.jmx.cmd_apply import cmd_apply
from jmxctl.api.jmx.cmd_list import cmd_list
from jmxctl.api.jmx.cmd_plan import cmd_plan
from jmxctl.cli._handle_stage_result import _handle_stage_result


def register_jmx_commands(app: typer.Typer) -> None:
    @app.command(name="apply")
    def apply_cmd(
        name: str = typer.Argument("", help="Service to converge; all configured services when omitted"),
    ) -> None:
        """Converge JMX configuration and restart changed services."""
        _handle_stage_result(cmd_apply)(name)

    @app.command(name="plan")
    def plan_cmd(name: str = typer.Argument(..., help="Configured service name")) -> None:
        """Show derived properties and managed files without changing anything."""
        _handle_stage_result(cmd_plan)(name)

    @app.command(name="list")
    def list_cmd() -> None:
        """List configured services."""
        _handle_stage_result(cmd_list)()
