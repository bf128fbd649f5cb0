"""Links Typer app factory."""

import typer

from mdlinks.api.links.cmd_check import cmd_check
from mdlinks.api.links.cmd_refs import cmd_refs
from mdlinks.api.links.render_summary import render_summary
from mdlinks.cli._handle_stage_result import _handle_stage_result


def links() -> typer.Typer:
    """Create and configure the links Typer app."""
    app = typer.Typer(
        name="links",
        help="Check and repair relative markdown links",
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

    @app.command(name="check")
    def check_cmd(
        fix: bool = typer.Option(False, "--fix", help="Rewrite links whose new location was found"),
        dry_run: bool = typer.Option(False, "--dry-run", help="Show what --fix would change without writing"),
        full_report: bool = typer.Option(False, "--full-report", help="Write the full broken link report"),
        file: str | None = typer.Option(None, "--file", help="Check only this markdown file (relative to --root)"),
        root: str | None = typer.Option(None, "--root", help="Project root (default: current directory)"),
        no_renames: bool = typer.Option(False, "--no-renames", help="Skip git rename history lookups"),
        fix_ambiguous: bool = typer.Option(
            False, "--fix-ambiguous", help="Also apply the best match when several files share the name"
        ),
    ) -> None:
        """Find broken relative links and optionally repair them."""
        _handle_stage_result(cmd_check, summary_renderer=render_summary)(
            root=root,
            file=file,
            fix=fix,
            dry_run=dry_run,
            full_report=full_report,
            rename_lookup=not no_renames,
            fix_ambiguous=fix_ambiguous,
        )

    @app.command(name="refs")
    def refs_cmd(
        path: str | None = typer.Argument(None, help="File or directory to check (default: project root)"),
        root: str | None = typer.Option(None, "--root", help="Project root (default: current directory)"),
    ) -> None:
        """Validate path@version references in frontmatter."""
        _handle_stage_result(cmd_refs)(path=path, root=root)

    return app
