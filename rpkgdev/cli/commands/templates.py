"""List the bundled template subtrees"""

import click

from ..utils.output import console, format_table, print_json
from ...core.template_source import TemplateSource


@click.command()
@click.option('--json', 'as_json', is_flag=True, help='Print as JSON')
@click.pass_context
def templates(ctx, as_json):
    """Show which template subtrees a deployment copies"""
    source = TemplateSource()

    rows = []
    for subtree in source.subtrees:
        source_dir = source.source_dir(subtree)
        files = source.files(subtree) if source_dir.is_dir() else []
        rows.append({
            'name': subtree.name,
            'destination': (subtree.destination or '.') + '/',
            'flag': f"--no-{subtree.flag.replace('_', '-')}" if subtree.flag else 'always',
            'files': len(files),
            'description': subtree.description,
        })

    if as_json:
        print_json(rows)
        return

    table = format_table(
        rows,
        [
            ('name', 'Subtree'),
            ('destination', 'Destination'),
            ('flag', 'Toggle'),
            ('files', 'Files'),
            ('description', 'Description'),
        ],
        title="Template subtrees"
    )
    console.print(table)
