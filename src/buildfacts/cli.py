"""Command-line interface for buildfacts."""

import json
import sys
from pathlib import Path

import click
from rich.text import Text

from buildfacts.config import get_output_path, get_pyproject, get_settings
from buildfacts.generator import collect_facts, write_built_file
from buildfacts.models import FactKind
from buildfacts.registry import feature_enabled, get_build_info, load_built_file
from buildfacts.utils.console import (
    _rich_success, _rich_error, _rich_info, _rich_warning,
    _create_facts_table, _get_console
)
from buildfacts.version import version_banner


def _lazy_yaml():
    """Lazy import for yaml module to improve startup performance."""
    try:
        import yaml
        return yaml
    except ImportError:
        raise ImportError("PyYAML is required but not installed")


def _load_info(from_file):
    """Facts of the installed package, or of a generated file when given."""
    if from_file:
        return load_built_file(from_file)
    return get_build_info()


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return

    try:
        banner = version_banner()
    except ValueError as e:
        _rich_error(f"Failed to load build facts: {e}", symbol="error")
        ctx.exit(1)
    _get_console().print(Text(banner, style="bold cyan"))
    ctx.exit()


@click.group(help="buildfacts: build provenance captured at build time, readable at runtime")
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit.")
@click.pass_context
def cli(ctx):
    """Main entry point for the buildfacts CLI."""
    ctx.ensure_object(dict)


@cli.command(help="Show every build fact")
@click.option('--format', 'output_format', type=click.Choice(['table', 'json', 'yaml']),
              default='table', show_default=True,
              help="Output format (yaml needs the 'yaml' feature of the installed buildfacts, even with --from)")
@click.option('--from', 'from_file', type=click.Path(dir_okay=False),
              help="Read facts from a generated module instead of the installed package")
def show(output_format, from_file):
    """List all build facts in catalog order."""
    try:
        info = _load_info(from_file)
    except (FileNotFoundError, ValueError) as e:
        _rich_error(f"Failed to load build facts: {e}", symbol="error")
        sys.exit(1)

    if output_format == 'json':
        click.echo(json.dumps(info.to_dict(), indent=2))
    elif output_format == 'yaml':
        # Gate on this program's own build, not on the facts being shown
        if not feature_enabled("yaml"):
            _rich_error("YAML output is not available: buildfacts was built without the 'yaml' feature")
            sys.exit(1)
        yaml = _lazy_yaml()
        click.echo(yaml.safe_dump(info.to_dict(), sort_keys=False), nl=False)
    else:
        _get_console().print(_create_facts_table(info, title=f"{info.name} {info.version}"))


@cli.command(name="get", help="Print a single build fact (exits 1 when the fact is absent)")
@click.argument('name')
@click.option('--from', 'from_file', type=click.Path(dir_okay=False),
              help="Read facts from a generated module instead of the installed package")
def get_fact(name, from_file):
    """Print one fact; collections print one element per line."""
    try:
        info = _load_info(from_file)
        fact = info.fact(name.upper())
    except KeyError:
        _rich_error(f"Unknown build fact: {name}")
        sys.exit(1)
    except (FileNotFoundError, ValueError) as e:
        _rich_error(f"Failed to load build facts: {e}", symbol="error")
        sys.exit(1)

    if fact.value is None:
        sys.exit(1)
    if fact.kind == FactKind.COLLECTION:
        for element in fact.value:
            click.echo(element)
    else:
        click.echo(fact.display_value())


@cli.command(help="List the features enabled in this build")
@click.option('--lowercase', is_flag=True, help="Print the lowercase feature names")
@click.option('--from', 'from_file', type=click.Path(dir_okay=False),
              help="Read facts from a generated module instead of the installed package")
def features(lowercase, from_file):
    """Print enabled features, one per line."""
    try:
        info = _load_info(from_file)
    except (FileNotFoundError, ValueError) as e:
        _rich_error(f"Failed to load build facts: {e}", symbol="error")
        sys.exit(1)
    names = info.collection("FEATURES_LOWERCASE" if lowercase else "FEATURES")
    if not names:
        _rich_info("No features were enabled in this build", symbol="info")
        return
    for feature in names:
        click.echo(feature)


@cli.command(help="Collect build facts and write the generated module")
@click.option('--project-dir', default=".", type=click.Path(file_okay=False),
              show_default=True, help="Project directory containing pyproject.toml")
@click.option('--output', '-o', type=click.Path(dir_okay=False),
              help="Generated module path (default: [tool.buildfacts].output or src/<package>/built.py)")
@click.option('--feature', '-F', 'feature_names', multiple=True,
              help="Enabled feature (repeatable, replaces configured features)")
@click.option('--check', is_flag=True, help="Exit 1 if the generated module is out of date, write nothing")
def generate(project_dir, output, feature_names, check):
    """Run the build step that records the build facts."""
    try:
        facts = collect_facts(project_dir, features=list(feature_names) or None)
        if output:
            output_path = Path(output)
        else:
            settings = get_settings(get_pyproject(project_dir))
            output_path = get_output_path(project_dir, facts["PKG_NAME"], settings)
        changed = write_built_file(output_path, facts, check=check)
    except (FileNotFoundError, ValueError, RuntimeError) as e:
        _rich_error(f"Failed to generate build facts: {e}", symbol="error")
        sys.exit(1)

    summary = (f"{facts['PKG_NAME']} {facts['PKG_VERSION']} for {facts['TARGET']}"
               f" (features: {facts['FEATURES_STR'] or 'none'})")
    if facts["CI_PLATFORM"]:
        summary += f" on {facts['CI_PLATFORM']}"

    if check:
        if changed:
            _rich_warning(f"{output_path} is out of date: {summary}", symbol="warning")
            sys.exit(1)
        _rich_success(f"{output_path} is up to date", symbol="check")
    elif changed:
        _rich_success(f"Wrote {output_path}: {summary}", symbol="success")
    else:
        _rich_info(f"{output_path} unchanged: {summary}", symbol="info")


def main():
    """Main entry point for the CLI."""
    try:
        cli(obj={})
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
