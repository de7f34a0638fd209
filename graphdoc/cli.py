"""graphdoc CLI — normalize object graphs from the command line."""

import json
import logging
import sys

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from graphdoc import __version__
from graphdoc.errors import NormalizationError

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """graphdoc — normalize object graphs into resource documents.

    Load a type schema, feed it objects with nested relationships, and get
    back a flat document where every related resource appears exactly once.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# ── Normalize ────────────────────────────────────────────────────────


@main.command()
@click.argument("schema_path")
@click.argument("input_path")
@click.option("--relaxed-order", is_flag=True, help="Accept object fields in any order")
@click.option("--indent", default=2, type=int, help="JSON indentation (0 for compact)")
def normalize(schema_path: str, input_path: str, relaxed_order: bool, indent: int):
    """Normalize the objects in INPUT_PATH using the types in SCHEMA_PATH.

    INPUT_PATH holds one object, a list of objects, or null, as JSON or YAML.
    The document is written to stdout as JSON.
    """
    from graphdoc.normalizer.collector import create_normalizer
    from graphdoc.spec.loader import load_registry, read_document

    try:
        registry = load_registry(schema_path)
    except NormalizationError as e:
        console.print(f"[red]Schema error:[/] {e}")
        sys.exit(1)

    try:
        data = read_document(input_path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        console.print(f"[red]Failed to parse input:[/] {e}")
        sys.exit(1)

    normalizer = create_normalizer(registry, strict_field_order=not relaxed_order)
    try:
        document = normalizer.normalize(data)
    except NormalizationError as e:
        console.print(f"[red]Normalization failed:[/] {e}")
        sys.exit(1)

    click.echo(json.dumps(document, indent=indent or None, default=str))


# ── Validate ─────────────────────────────────────────────────────────


@main.command()
@click.argument("schema_path")
@click.option("--strict", is_flag=True, help="Treat warnings as errors")
def validate(schema_path: str, strict: bool):
    """Validate a schema file (structure, then semantics)."""
    from graphdoc.spec.loader import read_document
    from graphdoc.spec.schema_validator import validate_schema
    from graphdoc.spec.semantic_validator import validate_semantics

    console.print(f"\n[bold blue]graphdoc[/] — Validating: {schema_path}\n")

    try:
        data = read_document(schema_path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        console.print(f"  [red]Failed to parse:[/] {e}")
        sys.exit(1)
    if isinstance(data, list):
        data = {"types": data}

    # Gate 1: Schema
    schema_issues = validate_schema(data)
    if schema_issues:
        console.print("[red]Schema validation FAILED:[/]")
        for issue in schema_issues:
            console.print(f"  [red]x[/] {issue}")
        sys.exit(1)
    console.print("  [green]v[/] Schema validation passed")

    # Gate 2: Semantic
    sem_result = validate_semantics(data)
    if sem_result.errors:
        console.print("[red]Semantic validation FAILED:[/]")
        for issue in sem_result.errors:
            console.print(f"  [red]x[/] [{issue.code}] {issue.message}")
    else:
        console.print("  [green]v[/] Semantic validation passed")

    for w in sem_result.warnings:
        console.print(f"  [yellow]![/] [{w.code}] {w.message}")

    console.print(Panel(escape(sem_result.summary()), title="Semantic Validation"))

    if not sem_result.passed:
        sys.exit(1)

    if strict and sem_result.warnings:
        console.print("\n[red]FAIL[/] (strict mode: warnings treated as errors)")
        sys.exit(1)

    console.print("\n[green]Valid![/]")


# ── Types ────────────────────────────────────────────────────────────


@main.command()
@click.argument("schema_path")
def types(schema_path: str):
    """List the types declared in a schema file."""
    from graphdoc.spec.loader import load_registry

    try:
        registry = load_registry(schema_path)
    except NormalizationError as e:
        console.print(f"[red]Schema error:[/] {e}")
        sys.exit(1)

    if not len(registry):
        console.print("[yellow]Schema declares no types.[/]")
        return

    table = Table(title=f"Types ({len(registry)} declared)")
    table.add_column("Type", style="cyan")
    table.add_column("Id", style="dim")
    table.add_column("Attributes")
    table.add_column("Relationships", style="green")

    for descriptor in registry:
        table.add_row(
            descriptor.type,
            descriptor.id_kind,
            ", ".join(descriptor.attribute_fields),
            ", ".join(descriptor.relationship_fields),
        )

    console.print(table)


# ── Schema ───────────────────────────────────────────────────────────


@main.command(name="schema")
def dump_schema():
    """Print the JSON Schema for schema files."""
    from graphdoc.spec.schema import get_schema

    click.echo(json.dumps(get_schema(), indent=2))


if __name__ == "__main__":
    main()
