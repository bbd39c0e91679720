"""CLI entry point for subtrans."""

import sys
from pathlib import Path

import click

from .config import Config
from .errors import ChunkTranslationError, SubtransError
from .formats import generate_output_path, get_format, read_subtitles, write_subtitles
from .languages import LANGUAGE_NAMES, common_languages, detect_language, get_language_name
from .logging_utils import setup_logging
from .oracle import PROVIDERS, create_oracle
from .translate import translate_subtitles


def _load_config() -> Config:
    try:
        return Config.from_env()
    except SubtransError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(package_name="subtrans")
def main() -> None:
    """Translate SRT and WebVTT subtitle files with an LLM."""


@main.command("translate")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--source",
    "-s",
    "source_lang",
    help="Source language code (auto-detect if not specified)",
)
@click.option(
    "--target",
    "-t",
    "target_lang",
    default="en",
    show_default=True,
    help="Target language code (e.g., es, fr, de)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output file path (default: input_name.{target}.{ext})",
)
@click.option(
    "--instructions",
    help="Custom translation instructions replacing the default ones",
)
@click.option(
    "--chunk-size",
    type=int,
    default=None,
    help="Subtitle entries per translation request (default: 50)",
)
@click.option(
    "--llm",
    type=click.Choice(PROVIDERS),
    default=None,
    help="Translation provider (default: claude CLI)",
)
@click.option(
    "--model",
    default=None,
    help="Model name for the selected provider",
)
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Chunks translated in parallel (default: 1)",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Seconds to wait for each translation request (default: 300)",
)
@click.option(
    "--retries",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Extra attempts for a failed translation request",
)
@click.option(
    "--continue-on-error",
    is_flag=True,
    help="Keep original text for chunks that fail instead of aborting",
)
@click.option(
    "--log-level",
    default=None,
    help="Log level (DEBUG, INFO, WARNING, ...)",
)
def translate_command(
    input_path: str,
    source_lang: str | None,
    target_lang: str,
    output: str | None,
    instructions: str | None,
    chunk_size: int | None,
    llm: str | None,
    model: str | None,
    workers: int | None,
    timeout: float | None,
    retries: int,
    continue_on_error: bool,
    log_level: str | None,
) -> None:
    """Translate a subtitle file from one language to another.

    \b
    Examples:
      subtrans translate movie.srt -t es
      subtrans translate movie.vtt -s en -t fr --chunk-size 25
      subtrans translate movie.srt -t de --llm ollama --model qwen2.5:7b
    """
    config = _load_config()
    setup_logging(log_level or config.log_level)

    provider = llm or config.provider
    chunk_size = chunk_size if chunk_size is not None else config.chunk_size
    workers = workers if workers is not None else config.workers

    try:
        oracle = create_oracle(provider, config, model=model, timeout=timeout)

        subtitles = read_subtitles(input_path)
        click.echo(f"Parsed {len(subtitles)} subtitle entries from {input_path}")

        output_path = Path(output) if output else generate_output_path(input_path, target_lang)
        get_format(output_path)

        if not source_lang:
            click.echo("Detecting source language...")
            source_lang = detect_language(subtitles, oracle)
            click.echo(f"  Detected: {source_lang} ({get_language_name(source_lang)})")

        if source_lang == target_lang:
            click.secho(
                f"Warning: source language ({source_lang}) matches target",
                fg="yellow",
            )

        click.echo(f"Translation: {source_lang} → {target_lang} ({provider})")
        click.echo(f"Output: {output_path}")
        click.echo()

        def on_translate_progress(chunk: int, total: int) -> None:
            click.echo(f"  Chunk {chunk}/{total}")

        click.echo(f"Translating {len(subtitles)} entries...")
        translated = translate_subtitles(
            subtitles,
            oracle,
            source_lang=source_lang,
            target_lang=target_lang,
            chunk_size=chunk_size,
            instructions=instructions,
            on_progress=on_translate_progress,
            workers=workers,
            retries=retries,
            continue_on_error=continue_on_error,
        )

        write_subtitles(translated, output_path)
        click.echo(f"  Saved to {output_path}")
        click.echo()
        click.secho("Done!", fg="green", bold=True)

    except ChunkTranslationError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        click.echo(
            f"{len(e.completed)} of {len(subtitles)} entries were translated before the failure.",
            err=True,
        )
        click.echo("Retry with --retries or --continue-on-error.", err=True)
        sys.exit(1)
    except SubtransError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


@main.command("detect")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--llm", type=click.Choice(PROVIDERS), default=None, help="Provider used for detection")
@click.option("--model", default=None, help="Model name for the selected provider")
def detect_command(input_path: str, llm: str | None, model: str | None) -> None:
    """Detect the language of a subtitle file."""
    config = _load_config()
    setup_logging(config.log_level)

    try:
        oracle = create_oracle(llm or config.provider, config, model=model)
        subtitles = read_subtitles(input_path)
        code = detect_language(subtitles, oracle)
    except SubtransError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    click.echo(f"{code}\t{get_language_name(code)}")


@main.command("languages")
def languages_command() -> None:
    """List known language codes."""
    for code in common_languages():
        click.echo(f"{code}\t{LANGUAGE_NAMES[code]}")


if __name__ == "__main__":
    main()
