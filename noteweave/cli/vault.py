"""Vault Typer app factory."""

import typer

from noteweave.api.vault.cmd_index import cmd_index
from noteweave.api.vault.cmd_render import cmd_render
from noteweave.api.vault.cmd_resolve import cmd_resolve
from noteweave.cli._handle_stage_result import handle_stage_result


def _print_html(output: dict) -> None:
    typer.echo(output["html"], nl=False)


def vault() -> typer.Typer:
    """Create and configure the vault Typer app."""
    app = typer.Typer(
        name="vault",
        help="Vault rendering and link resolution",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="render")
    def render_cmd(
        path: str = typer.Argument(..., help="Note to render"),
        output: str | None = typer.Option(None, "--output", "-o", help="Write HTML to this file"),
        html_only: bool = typer.Option(False, "--html", help="Print only the rendered HTML"),
    ) -> None:
        """Render a note with wikilinks resolved and embeds expanded."""
        printer = _print_html if html_only else None
        handle_stage_result(cmd_render, result_printer=printer)(path, output_path=output)

    @app.command(name="resolve")
    def resolve_cmd(
        link: str = typer.Argument(..., help="Link text as written inside [[...]]"),
    ) -> None:
        """Show what a link target resolves to."""
        handle_stage_result(cmd_resolve)(link)

    @app.command(name="index")
    def index_cmd() -> None:
        """Index the vault and report notes sharing a basename."""
        handle_stage_result(cmd_index)()

    return app
