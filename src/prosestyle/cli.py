"""Command-line interface for prosestyle."""

import logging
import sys
from dataclasses import replace
from typing import Iterable, List

import click

from prosestyle import __version__, io_utils
from prosestyle.checks import register_all_checks
from prosestyle.config import ConfigError, default_config, load_config
from prosestyle.engine import ProselintEngine
from prosestyle.models import SEVERITIES, LintConfig
from prosestyle.registry import CheckRegistry
from prosestyle.utils import (
    build_envelope,
    dump_json_line,
    filter_files_by_severity,
    hash_bytes,
    summarize_severities,
    utc_timestamp,
)


@click.group()
@click.version_option(version=__version__)
@click.pass_context
def main(ctx):
    """Rule-based prose style checks for plain text and DOCX files."""
    ctx.ensure_object(dict)


def build_registry() -> CheckRegistry:
    return register_all_checks(CheckRegistry())


def build_engine(config: LintConfig, registry: CheckRegistry) -> ProselintEngine:
    return ProselintEngine(registry, config)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _common_options(func):
    func = click.argument("paths", nargs=-1, required=True)(func)
    func = click.option(
        "--output",
        "-o",
        type=click.Path(),
        default=None,
        show_default="stdout",
        help="Output file path or '-' for stdout.",
    )(func)
    func = click.option(
        "--verbose",
        "-v",
        is_flag=True,
        help="Show progress and a summary of findings.",
    )(func)
    func = click.option(
        "--fail-on-findings",
        "-f",
        is_flag=True,
        help="Exit with status 1 if warning or error findings are present.",
    )(func)
    func = click.option(
        "--severity",
        type=click.Choice(list(SEVERITIES), case_sensitive=False),
        default="suggestion",
        show_default=True,
        help="Minimum severity to include in the output.",
    )(func)
    return func


def _resolve_config(
    registry: CheckRegistry,
    config_path,
    max_errors,
    enable: tuple[str, ...],
    disable: tuple[str, ...],
) -> LintConfig:
    config = default_config(registry)

    if config_path:
        try:
            loaded = load_config(config_path, base=config)
        except ConfigError as exc:
            raise click.ClickException(str(exc)) from exc
        # Checks the file does not mention keep their registered default.
        config = replace(loaded, checks={**config.checks, **loaded.checks})

    unknown = sorted(
        check_id for check_id in (*enable, *disable) if not registry.has_check(check_id)
    )
    if unknown:
        raise click.ClickException(f"Unknown check(s): {', '.join(unknown)}")

    overlap = sorted(set(enable) & set(disable))
    if overlap:
        raise click.ClickException(
            f"Check(s) both enabled and disabled: {', '.join(overlap)}"
        )

    checks = dict(config.checks)
    checks.update({check_id: True for check_id in enable})
    checks.update({check_id: False for check_id in disable})
    config = replace(config, checks=checks)

    if max_errors is not None:
        config = replace(config, max_errors=max_errors)

    return config


def run_lint(
    inputs: Iterable[io_utils.InputSource], engine: ProselintEngine, details: bool = False
) -> dict:
    generated_at = utc_timestamp()
    merged_files: List[dict] = []

    for source in inputs:
        data = source.handle.read()
        text = io_utils.extract_text(data, "" if source.is_stdin else source.path)
        detailed = engine.lint_with_details(text)

        file_entry = {
            "path": source.display_name,
            "sha256": hash_bytes(data),
            **detailed.result.as_dict(),
        }
        if details:
            file_entry["checks"] = [result.as_dict() for result in detailed.check_results]

        merged_files.append(file_entry)

    return build_envelope(
        tool="prosestyle-lint", files=merged_files, generated_at=generated_at
    )


@main.command()
@_common_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML configuration file (maxErrors, checks, severityOverrides).",
)
@click.option(
    "--max-errors",
    type=int,
    default=None,
    help="Maximum number of findings reported per file.",
)
@click.option("--enable", multiple=True, help="Enable a check by id (may be repeated).")
@click.option("--disable", multiple=True, help="Disable a check by id (may be repeated).")
@click.option(
    "--details",
    is_flag=True,
    help="Include per-check finding counts and timings.",
)
def lint(
    paths,
    output,
    verbose,
    fail_on_findings,
    severity,
    config_path,
    max_errors,
    enable,
    disable,
    details,
):
    """Lint plain text or DOCX files for prose style issues."""

    _configure_logging(verbose)
    registry = build_registry()
    engine = build_engine(
        _resolve_config(registry, config_path, max_errors, enable, disable), registry
    )

    inputs = io_utils.resolve_inputs(paths, mode="rb")
    output_handle, should_close = io_utils.resolve_output_handle(output, mode="w")

    try:
        if verbose:
            click.echo(f"Processing {len(inputs)} file(s)...", err=True)
            for source in inputs:
                click.echo(f"  - {source.display_name}", err=True)

        envelope = run_lint(inputs, engine, details=details)
        filtered_files = filter_files_by_severity(envelope.get("files", []), severity.lower())
        summary = summarize_severities(filtered_files)

        dump_json_line({**envelope, "files": filtered_files}, output_handle)

        if verbose:
            click.echo(
                "Summary: "
                f"suggestion={summary['suggestion']} "
                f"warning={summary['warning']} error={summary['error']}",
                err=True,
            )

        if fail_on_findings and (summary["warning"] or summary["error"]):
            raise SystemExit(1)
    finally:
        if should_close:
            output_handle.close()
        io_utils.close_inputs(inputs)


@main.command()
@click.option(
    "--category",
    default=None,
    help="Only list checks in this category (e.g. weasel_words).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    show_default="stdout",
    help="Output file path or '-' for stdout.",
)
def checks(category, output):
    """List the available checks grouped by category."""

    registry = build_registry()
    categories = registry.get_all_categories()

    if category is not None:
        categories = [entry for entry in categories if entry.id == category]
        if not categories:
            raise click.ClickException(f"Unknown category: {category}")

    output_handle, should_close = io_utils.resolve_output_handle(output, mode="w")
    try:
        dump_json_line(
            {
                "prosestyle_version": __version__,
                "tool": "prosestyle-checks",
                "generated_at": utc_timestamp(),
                "total_checks": registry.get_check_count(),
                "categories": [entry.as_dict() for entry in categories],
            },
            output_handle,
        )
    finally:
        if should_close:
            output_handle.close()


if __name__ == "__main__":
    main()
