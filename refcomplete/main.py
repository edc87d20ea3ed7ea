#!/usr/bin/env python3
"""Main entry point for the refcomplete CLI."""

import sys

import click

from refcomplete.cmdline import InMemoryCmdLine
from refcomplete.config import Settings, configure_logging
from refcomplete.console_app import ConsoleApp
from refcomplete.core.matcher import complete
from refcomplete.core.refs import RepositoryError, open_repository
from refcomplete.dialog import RadioListRefsDialog


@click.command()
@click.option("--repo", "repository", help="Path inside the git repository (default: current directory)")
@click.option("--keep-remote-name", is_flag=True, help="Only offer 'origin/branch', not 'branch'")
@click.option("--backward", is_flag=True, help="Cycle suggestions backwards")
@click.option("--dialog", is_flag=True, help="Pick from a list instead of cycling")
@click.option("--complete", "complete_text", metavar="TEXT",
              help="Complete TEXT once and print the result instead of prompting")
@click.option("--suffix", default="", help="Currently suggested suffix (with --complete)")
@click.option("--log-level", help="debug, info, warning, error or critical")
@click.option("--log-file", help="Write diagnostics to this file")
def main(
    repository: str | None,
    keep_remote_name: bool,
    backward: bool,
    dialog: bool,
    complete_text: str | None,
    suffix: str,
    log_level: str | None,
    log_file: str | None,
):
    """refcomplete - git ref name completion for the command line

    Type a command, press Tab to complete branch, tag and remote ref names.
    The submitted line is printed to stdout.

    Examples:
        refcomplete                          # Prompt in the current repository
        refcomplete --repo ~/src/project     # Another repository
        refcomplete --complete f/b           # Non-interactive, prints foo/bar
        git checkout "$(refcomplete)"
    """
    overrides = {
        "repository": repository,
        "strip_remote_name": False if keep_remote_name else None,
        "suggest_next_suffix": False if backward else None,
        "show_dialog": True if dialog else None,
        "log_level": log_level,
        "log_file": log_file,
    }
    settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
    logger = configure_logging(settings)

    if complete_text is not None:
        try:
            repo = open_repository(settings.repository)
            cmdline = InMemoryCmdLine(complete_text, suffix)
            complete(settings.to_options(), cmdline, repo, RadioListRefsDialog())
        except RepositoryError as e:
            logger.error("%s", e)
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        click.echo(cmdline.text)
        return

    line = ConsoleApp(settings).run()
    if line is None:
        sys.exit(130)
    click.echo(line)


if __name__ == "__main__":
    main()
