"""CLI entry point for coherrest."""

import sys
from typing import NoReturn

import click

from coherrest.document.loader import load_document, resolve_input
from coherrest.document.writer import save_document
from coherrest.enricher.security import add_security_scheme
from coherrest.enricher.semantic import enrich_semantics
from coherrest.errors import CoherRestError, MissingFileError

BANNER = (
    "\n=== CoherREST: Model-Driven REST API Coherence Tool ===\n"
    "This tool performs syntactic (security) and semantic (RBAC, validation, sensitivity) "
    "enrichment of OpenAPI specs.\n"
    "-------------------------------------------------------\n"
)


def _step(message: str) -> None:
    click.echo(f"[+] {message}")


def _fail(message: str) -> NoReturn:
    click.echo(message, err=True)
    sys.exit(1)


@click.command()
def main():
    """CoherREST — enrich an OpenAPI spec with security and semantic metadata."""
    click.echo(BANNER)

    raw_path = click.prompt(
        "Enter the path to your OpenAPI file (.json or .yaml)", default="", show_default=False
    )
    try:
        file_path = resolve_input(raw_path)
    except MissingFileError as e:
        _fail(f"Error: {e}")

    # Step 1: Load
    _step("Loading OpenAPI specification...")
    try:
        doc = load_document(file_path)
    except CoherRestError as e:
        _fail(f"Error loading OpenAPI file: {e}")
    _step("OpenAPI file loaded successfully.")

    # Step 2: Enrich
    try:
        _step("Adding syntactic enrichment: Security Scheme...")
        doc = add_security_scheme(doc)
        _step("Syntactic enrichment completed (Security Scheme added).")

        _step("Analyzing API structure and adding semantic enrichment...")
        doc = enrich_semantics(doc)
        _step("Semantic enrichment completed (RBAC, validation, PII metadata added).")
    except CoherRestError as e:
        _fail(f"Error enriching OpenAPI file: {e}")

    # Step 3: Save
    _step("Generating enriched OpenAPI file...")
    try:
        output = save_document(doc, file_path)
    except CoherRestError as e:
        _fail(f"Error writing enriched file: {e}")
    _step(f"Enriched file generated successfully: {output}")

    click.echo(
        "\n[✔] Process completed. Your OpenAPI specification has been "
        "syntactically and semantically enriched.\n"
    )
