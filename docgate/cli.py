"""Command-line interface for docgate."""

import json
import logging
import sys
from dataclasses import replace
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from docgate.config import build_submitter, load_settings
from docgate.encoding import encode_base64
from docgate.models import Document, ProductGroup

console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Submit documents to the goods-registration API under a rate limit."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )


@main.command()
@click.argument("document_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--signature-file", "-s", required=True,
              type=click.Path(exists=True, dir_okay=False),
              help="File holding the detached document signature.")
@click.option("--token", default=None, help="Bearer token (defaults to DOCGATE_AUTH_TOKEN).")
@click.option("--base-url", default=None, help="API base URL (defaults to DOCGATE_BASE_URL).")
@click.option("--limit", type=int, default=None, help="Max requests per window.")
@click.option("--window", type=float, default=None, help="Window length in seconds.")
@click.option("--product-group", type=click.Choice([g.value for g in ProductGroup],
                                                   case_sensitive=False),
              default=None, help="Product group tag for the request.")
def submit(document_path: str, signature_file: str, token: Optional[str],
           base_url: Optional[str], limit: Optional[int], window: Optional[float],
           product_group: Optional[str]) -> None:
    """Register the JSON document at DOCUMENT_PATH.

    \b
    Examples:
        docgate submit document.json -s document.sig
        docgate submit document.json -s document.sig --product-group SHOES
    """
    try:
        settings = load_settings()
    except ValueError as exc:
        _fail(str(exc))

    overrides = {}
    if token is not None:
        overrides["auth_token"] = token
    if base_url is not None:
        overrides["base_url"] = base_url
    if limit is not None:
        overrides["request_limit"] = limit
    if window is not None:
        overrides["window_seconds"] = window
    settings = replace(settings, **overrides)

    try:
        with open(document_path, encoding="utf-8") as f:
            document = Document.model_validate(json.load(f))
    except ValueError as exc:
        _fail(f"Could not read document: {exc}")

    try:
        with open(signature_file, encoding="utf-8") as f:
            signature = f.read().strip()
    except UnicodeDecodeError as exc:
        _fail(f"Could not read signature: {exc}")

    submitter = build_submitter(settings)
    group = ProductGroup(product_group.upper()) if product_group else None

    try:
        with console.status("[bold cyan]Submitting document...[/bold cyan]", spinner="dots"):
            result = submitter.submit_result(document, signature, product_group=group)
    finally:
        submitter.transport.close()

    if not result.ok:
        _fail(result.error.message)

    console.print(result.body, markup=False, highlight=False)


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def encode(path: str) -> None:
    """Print the base64 form of the file at PATH."""
    with open(path, "rb") as f:
        click.echo(encode_base64(f.read()))


if __name__ == "__main__":
    main()
