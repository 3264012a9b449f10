"""Inspect an existing R package directory"""

from pathlib import Path

import click

from ..utils.output import console, format_table, print_error, print_json
from ...api.exceptions import PackageNotFoundError
from ...core.descriptor import parse_description, validate_package_path

SHOWN_FIELDS = ["Package", "Title", "Version", "License", "Authors@R", "Description"]


@click.command()
@click.argument('path', required=False, default='.', type=click.Path(path_type=Path))
@click.option('--json', 'as_json', is_flag=True, help='Print all descriptor fields as JSON')
@click.pass_context
def inspect(ctx, path, as_json):
    """Show the DESCRIPTION fields of an R package

    Examples:
        rpkgdev inspect
        rpkgdev inspect ../mynewpackage --json
    """
    try:
        pkg = validate_package_path(path)
    except PackageNotFoundError as e:
        print_error(str(e))
        ctx.exit(1)

    fields = parse_description(pkg)

    if as_json:
        print_json({'path': str(pkg), 'fields': fields})
        return

    rows = [
        {'name': key, 'value': fields[key]}
        for key in SHOWN_FIELDS
        if key in fields
    ]
    console.print(format_table(rows, [('name', 'Field'), ('value', 'Value')], title=str(pkg)))
