"""
langprobe CLI - Main entry point
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from langprobe.core.config.settings import settings
from langprobe.core.config.validation import ConfigValidator, DetectorConfig
from langprobe.core.exceptions.custom_exceptions import LangProbeError
from langprobe.core.logging.logger import get_logger
from langprobe.detector import UNKNOWN_LANG, create_detector
from langprobe.profiles.loader import default_profiles_dir, load_profiles
from langprobe.profiles.registry import build_registry

# Initialize CLI app
app = typer.Typer(
    name="langprobe",
    help="N-gram language detection",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
logger = get_logger(__name__)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
) -> None:
    """
    langprobe CLI - identify the language of a text

    Run 'langprobe --help' for available commands.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.info("Verbose logging enabled")


def _read_input(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except OSError as e:
            console.print(f"Error reading input file: {e}", style="red")
            raise typer.Exit(1)
    if text is None:
        console.print("Provide TEXT or --file", style="red")
        raise typer.Exit(1)
    return text


@app.command()
def detect(
    text: Optional[str] = typer.Argument(None, help="Text to identify"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Read the text from a file"
    ),
    profiles_dir: Optional[str] = typer.Option(
        None, "--profiles", "-p", help="Directory of JSON language profiles"
    ),
    languages: Optional[List[str]] = typer.Option(
        None, "--lang", "-l", help="Candidate language (repeatable)"
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="Detector configuration file (YAML/JSON)"
    ),
    backend: Optional[str] = typer.Option(
        None, "--backend", "-b", help="Estimator backend (reference/numpy)"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Random seed for reproducible results"
    ),
    show_all: bool = typer.Option(
        False, "--all", "-a", help="Show every language above the threshold"
    ),
) -> None:
    """Detect the language of TEXT (or of --file)"""
    content = _read_input(text, file)

    try:
        config = (
            ConfigValidator.validate_file(config_file)
            if config_file
            else DetectorConfig()
        )
        registry = build_registry(
            load_profiles(profiles_dir, languages or config.languages)
        )
        with create_detector(
            registry,
            backend=backend or config.backend,
            seed=seed if seed is not None else config.seed,
            max_text_length=config.max_text_length,
        ) as detector:
            if config.alpha is not None:
                detector.set_alpha(config.alpha)
            if config.priors:
                detector.set_prior_map(config.priors)
            detector.append(content)
            ranked = detector.get_probabilities()
    except LangProbeError as e:
        logger.error("Detection failed", error_code=e.error_code, details=e.details)
        console.print(f"Error: {e.message}", style="red")
        raise typer.Exit(1)

    if not show_all:
        console.print(ranked[0].lang if ranked else UNKNOWN_LANG)
        return

    table = Table(title="Detected Languages")
    table.add_column("Language", style="cyan")
    table.add_column("Probability", style="green")
    for scored in ranked:
        table.add_row(scored.lang, f"{scored.prob:.5f}")
    if not ranked:
        table.add_row(UNKNOWN_LANG, "-")
    console.print(table)


@app.command(name="languages")
def list_languages(
    profiles_dir: Optional[str] = typer.Option(
        None, "--profiles", "-p", help="Directory of JSON language profiles"
    ),
) -> None:
    """List the available language profiles"""
    try:
        profiles = load_profiles(profiles_dir)
    except LangProbeError as e:
        console.print(f"Error: {e.message}", style="red")
        raise typer.Exit(1)

    table = Table(title=f"Language Profiles ({profiles_dir or default_profiles_dir()})")
    table.add_column("Language", style="cyan")
    table.add_column("Grams", style="green")
    table.add_column("Tokens (1/2/3)", style="yellow")
    for profile in profiles:
        table.add_row(
            profile.name or "-",
            str(len(profile.freq)),
            "/".join(str(n) for n in profile.n_words),
        )
    console.print(table)


@app.command()
def version() -> None:
    """Show langprobe version information"""
    table = Table(title="langprobe Version Information")
    table.add_column("Component", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("Environment", style="yellow")

    table.add_row("langprobe", settings.APP_VERSION, settings.ENVIRONMENT)
    table.add_row("Backend", settings.DETECTOR_BACKEND, "Default")
    table.add_row("Python", "3.9+", "Required")

    console.print(table)


if __name__ == "__main__":
    app()
