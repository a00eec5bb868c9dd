"""Command-line adapter for novelizer.

Loads settings and a chat export, runs the pipeline through its single entry
point, prints progress and writes the exported file. No business logic lives
here.
"""

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from .config import NovelSettings, SettingsStore
from .errors import ConfigurationError, NovelizerError
from .export.exporter import write_export
from .observability.base import LoggingMetricsHook
from .pipeline.orchestrator import generate_novel
from .transcript.loader import load_chat_log

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path("novelizer.yaml")


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


app = typer.Typer(
    name="novelizer",
    no_args_is_help=True,
    help="Turn role-play chat transcripts into novel chapters.",
)


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print one failure line and exit with code 1."""
    typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def render_progress(stage: str, completed: int, total: int) -> None:
    if stage == "parsing":
        typer.echo("Parsing chat history...")
    elif stage == "generating":
        typer.echo(f"[progress] chapter {completed}/{total}")
    elif stage == "done":
        typer.echo("Formatting output...")


def _configure_logging(log_level: LogLevel) -> None:
    logging.basicConfig(
        level=log_level.value.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def generate(
    chat_file: Annotated[Path, typer.Argument(help="Chat export (JSON Lines).")],
    config_file: Annotated[
        Path, typer.Option("--config", help="Settings YAML file.")
    ] = DEFAULT_SETTINGS_PATH,
    out: Annotated[Path, typer.Option("--out", help="Output directory.")] = Path("."),
    api_key: Annotated[
        str | None,
        typer.Option("--api-key", envvar="NOVELIZER_API_KEY", help="Provider API key."),
    ] = None,
    provider: Annotated[
        str | None, typer.Option("--provider", help="openai or anthropic.")
    ] = None,
    model: Annotated[str | None, typer.Option("--model", help="Model name.")] = None,
    narrative_style: Annotated[
        str | None,
        typer.Option("--style", help="first_person, third_person or omniscient."),
    ] = None,
    chapter_length: Annotated[
        int | None, typer.Option("--chapter-length", help="Messages per chapter.")
    ] = None,
    output_format: Annotated[
        str | None, typer.Option("--format", help="markdown, html or plain.")
    ] = None,
    include_ooc: Annotated[
        bool | None,
        typer.Option("--include-ooc/--no-include-ooc", help="Keep OOC lines."),
    ] = None,
    include_actions: Annotated[
        bool | None,
        typer.Option(
            "--include-actions/--no-include-actions",
            help="Classify partly emphasised lines as mixed.",
        ),
    ] = None,
    character: Annotated[
        str | None,
        typer.Option("--character", help="Character name for the title."),
    ] = None,
    log_level: Annotated[
        LogLevel, typer.Option("--log-level", case_sensitive=False)
    ] = LogLevel.WARNING,
) -> None:
    """Generate a novel from a chat export and write it to --out."""
    _configure_logging(log_level)
    try:
        settings = SettingsStore(config_file).load().with_overrides(
            api_key=api_key,
            api_provider=provider,
            model=model,
            narrative_style=narrative_style,
            chapter_length=chapter_length,
            output_format=output_format,
            include_ooc=include_ooc,
            include_actions=include_actions,
        )
        chat_log = load_chat_log(chat_file)
        document = asyncio.run(
            generate_novel(
                chat_log.messages,
                settings,
                character_name=character or chat_log.character_name,
                on_progress=render_progress,
                metrics_hook=LoggingMetricsHook(),
            )
        )
        path = write_export(document, settings.output_format, out)
    except NovelizerError as exc:
        logger.error("Novel generation failed: %s", exc)
        exit_with_command_error("novel generation", exc)

    typer.echo(f"Complete! {len(document.chapters)} chapters written to {path}")


@app.command("init-config")
def init_config(
    config_file: Annotated[
        Path, typer.Argument(help="Where to write the settings file.")
    ] = DEFAULT_SETTINGS_PATH,
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite an existing file.")
    ] = False,
) -> None:
    """Write a settings file filled with defaults."""
    if config_file.exists() and not force:
        exit_with_command_error(
            "init-config",
            ConfigurationError(f"'{config_file}' exists, pass --force to overwrite"),
        )
    try:
        SettingsStore(config_file).save(NovelSettings())
    except NovelizerError as exc:
        exit_with_command_error("init-config", exc)
    typer.echo(f"Settings written to {config_file}")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
