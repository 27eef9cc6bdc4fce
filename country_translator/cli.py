"""Command-line interface for country name translation.

Supports bilingual operation (English/German) via:
- --language / -l option
- COUNTRY_TRANSLATOR_LANGUAGE environment variable
- LANG environment variable
- Default: English
"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console

from country_translator import __version__
from country_translator.config.manager import ConfigManager
from country_translator.core.engine import TranslationEngine
from country_translator.core.errors import ResourceLoadError
from country_translator.data.schemas import CodeEntry, Config, StoreBackend
from country_translator.i18n import get_catalog, set_language, t
from country_translator.output.formatter import ConsoleFormatter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

console = Console()
formatter = ConsoleFormatter(console)

QUIT = "quit"

# Exit status when a lookup completes without a translation
EXIT_NOT_TRANSLATED = 2


def get_config(
    config_path: Optional[str],
    backend: Optional[str] = None,
    country_codes: Optional[str] = None,
    language_codes: Optional[str] = None,
    translations: Optional[str] = None,
) -> Config:
    """Load configuration from file and environment, then apply CLI overrides."""
    cfg = ConfigManager(config_path).load()
    overrides = {
        "backend": StoreBackend(backend) if backend else None,
        "country_codes_path": country_codes,
        "language_codes_path": language_codes,
        "translations_path": translations,
    }
    return cfg.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def build_engine(ctx: click.Context) -> TranslationEngine:
    """Create the engine from the options given to the command group."""
    opts = ctx.obj
    cfg = get_config(
        opts.get("config"),
        backend=opts.get("backend"),
        country_codes=opts.get("country_codes"),
        language_codes=opts.get("language_codes"),
        translations=opts.get("translations"),
    )
    return TranslationEngine.from_config(cfg)


def handle_error(error: Exception, verbose: bool = False) -> None:
    """Report an error the way every command does and exit with status 1."""
    if isinstance(error, ResourceLoadError):
        formatter.print_error(t("cli.error.load", error=str(error)))
    elif isinstance(error, ValueError):
        formatter.print_error(t("cli.error.invalid_input", error=str(error)))
    else:
        formatter.print_error(t("cli.error.generic", error=str(error)))
    if verbose:
        logger.exception("Detailed error:")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "-l", "--language",
    type=click.Choice(["en", "de"]),
    envvar="COUNTRY_TRANSLATOR_LANGUAGE",
    help=t("cli.option.language"),
)
@click.option(
    "-c", "--config",
    type=click.Path(exists=True),
    help=t("cli.option.config"),
)
@click.option(
    "-b", "--backend",
    type=click.Choice([b.value for b in StoreBackend]),
    help=t("cli.option.backend"),
)
@click.option(
    "--country-codes",
    type=click.Path(),
    help=t("cli.option.country_codes"),
)
@click.option(
    "--language-codes",
    type=click.Path(),
    help=t("cli.option.language_codes"),
)
@click.option(
    "--translations",
    type=click.Path(),
    help=t("cli.option.translations"),
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help=t("cli.option.verbose"),
)
@click.pass_context
def cli(
    ctx: click.Context,
    language: Optional[str],
    config: Optional[str],
    backend: Optional[str],
    country_codes: Optional[str],
    language_codes: Optional[str],
    translations: Optional[str],
    verbose: bool,
):
    """Country Translator - translate country names into other languages.

    Länderübersetzer - Ländernamen in andere Sprachen übersetzen.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if language:
        set_language(language)

    ctx.ensure_object(dict)
    ctx.obj.update(
        language=language or get_catalog().get_language(),
        config=config,
        backend=backend,
        country_codes=country_codes,
        language_codes=language_codes,
        translations=translations,
        verbose=verbose,
    )


@cli.command()
@click.argument("country")
@click.argument("language")
@click.pass_context
def translate(ctx: click.Context, country: str, language: str):
    """Translate COUNTRY into LANGUAGE, both given by name.

    Example:
        country-translator translate Canada Spanish
    """
    try:
        engine = build_engine(ctx)
        result = engine.translate(country, language)
    except Exception as e:
        handle_error(e, ctx.obj.get("verbose", False))
        return

    formatter.print_translation_result(result)
    if not result.is_translated:
        sys.exit(EXIT_NOT_TRANSLATED)


@cli.command()
@click.pass_context
def countries(ctx: click.Context):
    """List the countries that can be translated.

    Example:
        country-translator countries
    """
    try:
        engine = build_engine(ctx)
        entries = engine.available_countries()
    except Exception as e:
        handle_error(e, ctx.obj.get("verbose", False))
        return

    formatter.print_entry_list(entries, title=t("fmt.countries_title", count=len(entries)))


@cli.command()
@click.argument("country")
@click.pass_context
def languages(ctx: click.Context, country: str):
    """List the languages COUNTRY can be translated into.

    Example:
        country-translator languages Canada
    """
    try:
        engine = build_engine(ctx)
        country_code = engine.country_codes.code_for_name(country)
        entries = engine.available_languages(country_code) if country_code else []
    except Exception as e:
        handle_error(e, ctx.obj.get("verbose", False))
        return

    if country_code is None:
        formatter.print_error(t("result.country_not_recognized", country=country))
        if engine.suggester:
            suggestions = engine.suggester.suggest(country, engine.country_codes.names())
            if suggestions:
                formatter.print_info(t("result.suggestions", names=", ".join(suggestions)))
        sys.exit(EXIT_NOT_TRANSLATED)

    formatter.print_entry_list(
        entries, title=t("fmt.languages_title", country=country.strip(), count=len(entries))
    )


@cli.command()
@click.pass_context
def stats(ctx: click.Context):
    """Show statistics about the loaded code tables and translations.

    Example:
        country-translator --backend fixed stats
    """
    try:
        engine = build_engine(ctx)
        stats_data = engine.get_stats()
    except Exception as e:
        handle_error(e, ctx.obj.get("verbose", False))
        return

    formatter.print_stats(stats_data)


def prompt_for_entry(
    entries: list[CodeEntry], prompt_key: str, invalid_key: str
) -> Optional[CodeEntry]:
    """List entries by name and ask for one until a listed name is typed.

    Returns:
        The chosen entry, or None if the user typed quit.
    """
    by_name = {entry.display_name: entry for entry in entries}

    while True:
        formatter.print_names(entries)
        answer = click.prompt(t(prompt_key), default="", show_default=False).strip()

        if answer.lower() == QUIT:
            return None
        if answer in by_name:
            return by_name[answer]

        formatter.print_error(t(invalid_key))


@cli.command()
@click.pass_context
def interactive(ctx: click.Context):
    """Pick a country and a language from menus until you type quit.

    Example:
        country-translator interactive
    """
    try:
        engine = build_engine(ctx)
    except Exception as e:
        handle_error(e, ctx.obj.get("verbose", False))
        return

    while True:
        country_entries = engine.available_countries()
        if not country_entries:
            formatter.print_warning(t("cli.interactive.no_countries"))
            break

        country = prompt_for_entry(
            country_entries,
            "cli.interactive.select_country",
            "cli.interactive.invalid_country",
        )
        if country is None:
            break

        language_entries = engine.available_languages(country.code)
        if not language_entries:
            formatter.print_warning(
                t("cli.interactive.no_languages", country=country.display_name)
            )
            continue

        language = prompt_for_entry(
            language_entries,
            "cli.interactive.select_language",
            "cli.interactive.invalid_language",
        )
        if language is None:
            break

        result = engine.translate(country.display_name, language.display_name)
        if result.is_translated:
            formatter.print_success(
                t(
                    "cli.interactive.result",
                    country=country.display_name,
                    language=language.display_name,
                    translation=result.translation,
                )
            )
        else:
            formatter.print_warning(formatter.describe_result(result))

        again = click.prompt(t("cli.interactive.continue"), default="", show_default=False)
        if again.strip().lower() == QUIT:
            break

    formatter.print_info(t("cli.interactive.goodbye"))


if __name__ == "__main__":
    cli()
