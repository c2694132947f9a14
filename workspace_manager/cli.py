from __future__ import annotations

from pathlib import Path

import click
from loguru import logger

from workspace_manager import __version__
from workspace_manager.errors import WorkspaceError
from workspace_manager.log import LOG_LEVELS, setup_logging
from workspace_manager.merger import create_workspace, default_workspace_name
from workspace_manager.settings import get_settings
from workspace_manager.store import workspace_filename, write_workspace
from workspace_manager.tasks import TaskOptions, resolve_command


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-p", "--path", default=".", show_default=True, help="Directory to scan for workspace folders.")
@click.option(
    "-e",
    "--exclude-current",
    is_flag=True,
    default=False,
    help="Exclude current directory from workspace (default: include).",
)
@click.option("-n", "--name", default=None, help="Custom name for the workspace file (without extension).")
@click.option("-u", "--update-task", is_flag=True, default=False, help="Update workspace task even if file exists.")
@click.option("--strict", is_flag=True, default=False, help="Fail instead of replacing an unparsable workspace file.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (default: from WSM_LOG_LEVEL or WARNING).",
)
@click.version_option(__version__, "-V", "--version")
def main(
    path: str,
    exclude_current: bool,
    name: str | None,
    update_task: bool,
    strict: bool,
    log_level: str | None,
) -> None:
    """VS Code workspace manager that creates workspace entries for folders."""
    try:
        settings = get_settings()
        setup_logging(log_level or settings.log_level)
    except ValueError as exc:
        # pydantic ValidationError for bad WSM_* values, loguru for unknown levels
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    try:
        current_dir = Path.cwd().resolve()
        scan_path = Path(path).resolve(strict=True)

        workspace_name = name if name is not None else default_workspace_name(current_dir)
        workspace_file = current_dir / workspace_filename(workspace_name)

        document = create_workspace(
            scan_path,
            workspace_name,
            TaskOptions(path=path, name=name, exclude_current=exclude_current),
            base_path=current_dir,
            command=resolve_command(),
            update_task=update_task,
            workspace_file=workspace_file,
            strict=strict,
            settings=settings,
        )
        write_workspace(workspace_file, document)
    except (OSError, WorkspaceError) as exc:
        logger.debug("Run failed: {!r}", exc)
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Workspace file '{workspace_file.name}' updated successfully!")


if __name__ == "__main__":
    main()
