"""CLI - main entry point."""

import sys


def _configure_logging() -> None:
    from mdlinks.api.config.MdlinksConfig import MdlinksConfig
    from mdlinks.utils.configure_logging import configure_logging

    try:
        level = MdlinksConfig.load().log.level
    except ValueError:
        # The command itself reports the broken config
        level = "INFO"
    configure_logging(MdlinksConfig.get_home_dir(), level=level)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from mdlinks.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from mdlinks import __version__

        print(f"mdlc {__version__}")
        return 0

    _configure_logging()
    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    except typer.BadParameter as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except typer.Abort:
        typer.echo("Aborted", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
