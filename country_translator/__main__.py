"""Allow running the CLI with ``python -m country_translator``."""

from country_translator.cli import cli

if __name__ == "__main__":
    cli()
