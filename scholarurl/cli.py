# scholarurl/cli.py
import json
import logging
import sys
import webbrowser
from pathlib import Path
from typing import Annotated

import cyclopts

from scholarurl.builder import (
    check_fields,
    example_model,
    with_field,
    with_results_per_page,
    with_target,
    with_years,
)
from scholarurl.compilers import compile_url
from scholarurl.errors import ScholarURLError
from scholarurl.fields import default_field, field_options, is_valid_field
from scholarurl.models import Operator, QueryModel, Target, TermGroup
from scholarurl.validate import validate

logger = logging.getLogger(__name__)

app = cyclopts.App(
    name="scholarurl",
    help="Build IEEE Xplore and Scopus search URLs from grouped boolean terms.",
)


def _parse_group(text: str, field: str) -> TermGroup:
    """Parse ``[AND:|OR:]term1; term2; ...`` into a TermGroup.

    Example: "AND:deep learning; EEG" -> (deep learning AND EEG)
    """
    operator = Operator.OR
    head, sep, rest = text.partition(":")
    if sep and head.strip().upper() in Operator.__members__:
        operator = Operator(head.strip().upper())
        text = rest
    return TermGroup(terms=tuple(text.split(";")), field=field, operator=operator)


def _load_model(source: Path) -> QueryModel:
    """Read a JSON model from a file, or from stdin when ``source`` is ``-``."""
    text = sys.stdin.read() if str(source) == "-" else source.read_text()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ScholarURLError(f"Invalid JSON model: {e}") from e
    if not isinstance(data, dict):
        raise ScholarURLError("JSON model must be an object")
    return check_fields(QueryModel.from_dict(data))


def _build_model(
    target: str,
    groups: list[str],
    field: str | None,
    start_year: int,
    end_year: int,
    limit: int,
) -> QueryModel:
    resolved = Target.coerce(target)
    field = field or default_field(resolved)
    if not is_valid_field(resolved, field):
        valid = [opt.value for opt in field_options(resolved)]
        raise ScholarURLError(f"Unknown field {field!r} for {resolved.value}. Available: {valid}")
    return QueryModel(
        target=resolved,
        groups=tuple(_parse_group(g, field) for g in groups),
        start_year=start_year,
        end_year=end_year,
        results_per_page=limit,
    )


@app.command(name="generate")
def generate(
    groups: Annotated[
        list[str] | None,
        cyclopts.Parameter(
            name=["--group", "-g"],
            help="Term group, e.g. 'OR:neural decoding; brain decoding'. Repeatable.",
        ),
    ] = None,
    target: Annotated[
        str,
        cyclopts.Parameter(name=["--target", "-t"], help="Target: ieee, scopus"),
    ] = "ieee",
    field: Annotated[
        str | None,
        cyclopts.Parameter(name=["--field"], help="Metadata field for every group"),
    ] = None,
    start_year: Annotated[
        int,
        cyclopts.Parameter(name=["--start-year", "-s"], help="First publication year"),
    ] = 2020,
    end_year: Annotated[
        int,
        cyclopts.Parameter(name=["--end-year", "-e"], help="Last publication year"),
    ] = 2024,
    limit: Annotated[
        int,
        cyclopts.Parameter(name=["--limit", "-n"], help="Results per page (Scopus)"),
    ] = 50,
    example: Annotated[
        bool,
        cyclopts.Parameter(
            name="--example",
            help="Use the built-in example query (field, years and limit still apply)",
        ),
    ] = False,
    from_file: Annotated[
        Path | None,
        cyclopts.Parameter(name=["--from", "-f"], help="JSON model file ('-' for stdin)"),
    ] = None,
    format: Annotated[
        str,
        cyclopts.Parameter(name=["--format"], help="Output format: text, json"),
    ] = "text",
    open_url: Annotated[
        bool,
        cyclopts.Parameter(name="--open", help="Open the URL in a web browser"),
    ] = False,
    verbose: Annotated[
        bool,
        cyclopts.Parameter(name=["--verbose", "-v"], help="Enable debug logging"),
    ] = False,
) -> None:
    """Validate a query and print its search URL."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    if format not in ("text", "json"):
        print(f"Error: Unknown format: {format}", file=sys.stderr)
        sys.exit(1)

    try:
        if example:
            model = with_target(example_model(), target)
            model = with_results_per_page(with_years(model, start_year, end_year), limit)
            if field is not None:
                model = with_field(model, field)
        elif from_file is not None:
            model = _load_model(from_file)
        else:
            model = _build_model(target, groups or [], field, start_year, end_year, limit)
    except (ScholarURLError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.debug("Model: %s", model)
    report = validate(model)
    url = compile_url(model) if report.valid else None

    if format == "json":
        print(
            json.dumps(
                {
                    "url": url,
                    "valid": report.valid,
                    "errors": list(report.errors),
                    "warnings": list(report.warnings),
                },
                indent=2,
                ensure_ascii=False,
            )
        )
    elif url is not None:
        print(url)

    for warning in report.warnings:
        print(f"[WARN] {warning}", file=sys.stderr)

    if not report.valid:
        for error in report.errors:
            print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)

    if open_url and url:
        webbrowser.open(url, new=2)


@app.command(name="fields")
def fields(
    target: Annotated[str, cyclopts.Parameter(help="Target: ieee, scopus")],
) -> None:
    """List the metadata fields a target accepts."""
    try:
        options = field_options(target)
    except ScholarURLError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for option in options:
        print(f"{option.value}\t{option.label}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
