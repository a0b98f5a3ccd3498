import functools
import logging
import sys

import click

from .changes import fetch_change_list, filter_changes, pair_changes
from .errors import CssRenameError
from .files import resolve_files
from .output.formatters import format_output
from .pipeline import run_pipeline
from .utils.config import (
    DEFAULT_CONFIG,
    get_config_path,
    load_config,
    require_setting,
    save_config,
)


class OrderedGroup(click.Group):
    def __init__(self, *args, commands_order: list[str] | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.commands_order = commands_order or []

    def list_commands(self, ctx):
        commands = super().list_commands(ctx)
        if self.commands_order:
            ordered = [c for c in self.commands_order if c in commands]
            remaining = [c for c in commands if c not in self.commands_order]
            return ordered + remaining
        return commands


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )


def load_settings(ctx) -> dict:
    config = load_config()
    level = "debug" if ctx.obj["verbose"] else config["logging"]["level"]
    setup_logging(level)
    return config


def abort_on_error(func):
    """Decorator that turns CssRenameError into a click error (exit code 1)."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CssRenameError as e:
            raise click.ClickException(str(e)) from e
    return wrapper


def output_format(ctx) -> str:
    return "json" if ctx.obj["json"] else "plain"


CLI_HELP = """\
cssrename renames CSS class selectors across stylesheets using a change list
fetched from a URL. The change list is plain text with one class name per
line: an old name followed by its new name, repeated.

Only renames where the names differ and at least one of them contains an
underscore or a hyphen are applied.

`cssrename run` rewrites the files named by FILES_INPUT (comma-separated files,
directories or glob patterns), writes changes-summary.json and exits with 1 if
anything changed, 0 otherwise. `cssrename changes` and `cssrename files`
preview the change list and the file set without writing anything.
"""

CHANGES_URL_HELP = "URL of the change list (env: CHANGES_URL)"
FILES_HELP = "Comma-separated files, directories or globs (env: FILES_INPUT)"
EXTENSION_HELP = "File suffix collected from directories (repeatable, default from config)"


@click.group(
    cls=OrderedGroup,
    commands_order=["run", "changes", "files", "config"],
    help=CLI_HELP,
    context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 120},
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Log every substitution")
@click.pass_context
def cli(ctx, json_output, verbose):
    ctx.ensure_object(dict)
    ctx.obj["json"] = json_output
    ctx.obj["verbose"] = verbose


@cli.command("run")
@click.option("--changes-url", envvar="CHANGES_URL", help=CHANGES_URL_HELP)
@click.option("--files", "files_input", envvar="FILES_INPUT", help=FILES_HELP)
@click.option("--summary", "summary_path", type=click.Path(dir_okay=False),
              help="Summary file to write (default: changes-summary.json)")
@click.option("-e", "--extension", "extensions", multiple=True, help=EXTENSION_HELP)
@click.pass_context
@abort_on_error
def run(ctx, changes_url, files_input, summary_path, extensions):
    """Rename selectors in place and write the change summary.

    Exits with 1 when at least one selector was renamed or the run failed,
    and with 0 when nothing changed.
    """
    config = load_settings(ctx)
    changes_url = require_setting(changes_url, "CHANGES_URL")
    files_input = require_setting(files_input, "FILES_INPUT")

    summary = run_pipeline(
        changes_url,
        files_input,
        summary_path=summary_path or config["summary"]["path"],
        extensions=list(extensions) or config["files"]["extensions"],
    )

    click.echo(format_output(summary.to_json_dict(), output_format(ctx)))

    if summary.has_changes:
        ctx.exit(1)


@cli.command("changes")
@click.option("--changes-url", envvar="CHANGES_URL", help=CHANGES_URL_HELP)
@click.pass_context
@abort_on_error
def changes(ctx, changes_url):
    """Fetch the change list and print the renames that would be applied."""
    load_settings(ctx)
    changes_url = require_setting(changes_url, "CHANGES_URL")

    relevant = filter_changes(pair_changes(fetch_change_list(changes_url)))
    result = [change.model_dump(by_alias=True) for change in relevant]
    click.echo(format_output(result, output_format(ctx)))


@cli.command("files")
@click.option("--files", "files_input", envvar="FILES_INPUT", help=FILES_HELP)
@click.option("-e", "--extension", "extensions", multiple=True, help=EXTENSION_HELP)
@click.pass_context
@abort_on_error
def files(ctx, files_input, extensions):
    """Print the files that a run would check."""
    config = load_settings(ctx)
    files_input = require_setting(files_input, "FILES_INPUT")

    resolved = resolve_files(files_input, list(extensions) or config["files"]["extensions"])
    click.echo(format_output(resolved, output_format(ctx)))


@cli.command()
@click.option("--init", "init_config", is_flag=True, help="Write the default config file")
@click.pass_context
def config(ctx, init_config):
    """Print config file location and contents."""
    config_path = get_config_path()

    if init_config:
        if config_path.exists():
            raise click.ClickException(f"Config file already exists: {config_path}")
        save_config(DEFAULT_CONFIG)
        click.echo(f"Wrote default config: {config_path}")
        return

    click.echo(f"Config file: {config_path}")
    click.echo()

    if config_path.exists():
        click.echo(config_path.read_text())
    else:
        click.echo("(file does not exist, using defaults)")


if __name__ == "__main__":
    cli()
