from __future__ import annotations

"""
Typer CLI for inspecting the property catalog of the .NET language plugins.

Commands:
- properties: build and print the catalog of a language for a host API version
- key: print the key a property resolves to for any language key
- languages: list the built-in languages
"""

import json
import logging
from typing import Optional

import typer

from dotnet_shared.config import API_VERSION_ENV_VAR, Config, get_default_config, get_language
from dotnet_shared.properties.definitions import PropertyDefinitions
from dotnet_shared.properties.keys import KEY_FUNCTIONS
from dotnet_shared.reporting.console import print_catalog
from dotnet_shared.version import Version

logger = logging.getLogger(__name__)

app = typer.Typer(help="dotnet-shared - property catalog of the .NET analyzer plugins.")


def _parse_version(raw: str) -> Version:
    try:
        return Version.parse(raw)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--api-version") from exc


@app.command()
def properties(
    language: str = typer.Argument(..., help="Language key, e.g. cs or vbnet."),
    api_version: Optional[str] = typer.Option(
        None,
        "--api-version",
        help="Host API version (default: $DOTNET_SHARED_API_VERSION or 7.4).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print definitions as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show descriptions and debug logs."),
) -> None:
    """
    Print the properties a language plugin declares to the host.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if api_version:
        config = get_default_config()
        version = _parse_version(api_version)
    else:
        try:
            config = Config.from_env()
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint=API_VERSION_ENV_VAR) from exc
        version = config.api_version

    try:
        lang = get_language(language, config)
    except KeyError:
        known = ", ".join(c.key for c in config.languages)
        raise typer.BadParameter(f"Unknown language {language!r} (known: {known})", param_hint="LANGUAGE") from None

    definitions = PropertyDefinitions.from_config(lang, version).create()
    logger.info("%d properties for %s on host API %s", len(definitions), lang.key, version)

    if as_json:
        payload = [d.model_dump(mode="json", exclude_none=True) for d in definitions]
        typer.echo(json.dumps(payload, indent=2))
        return

    print_catalog(definitions, title=f"{lang.name} properties (API {version})", verbose=verbose)


@app.command()
def key(
    language_key: str = typer.Argument(..., help="Language key, e.g. cs."),
    property_name: str = typer.Argument(..., metavar="PROPERTY", help="Property short name, e.g. fileSuffixes."),
) -> None:
    """
    Print the full settings key of a property.
    """
    func = KEY_FUNCTIONS.get(property_name)
    if func is None:
        raise typer.BadParameter(
            f"Unknown property {property_name!r} (known: {', '.join(KEY_FUNCTIONS)})",
            param_hint="PROPERTY",
        )
    typer.echo(func(language_key))


@app.command()
def languages() -> None:
    """
    List the built-in languages and their default file suffixes.
    """
    for lang in get_default_config().languages:
        typer.echo(f"{lang.key}\t{lang.name}\t{lang.file_suffixes_default}")


def main() -> None:
    """Entry point for `python -m dotnet_shared.main`."""
    app()


if __name__ == "__main__":
    main()
