"""Command-line interface for the OpenAPI nullable fixer."""

import sys
import click
from pathlib import Path
from .fixer import NullableFixer


USAGE = "Usage: fix-openapi <path_to_openapi.json>"


@click.command()
@click.argument('openapi_path', required=False, type=click.Path(path_type=Path))
def main(openapi_path: Path):
    """Rewrite anyOf null unions in an OpenAPI JSON file as nullable schemas.

    The file is overwritten with the rewritten document.
    """
    if openapi_path is None:
        click.echo(USAGE, err=True)
        sys.exit(1)

    # Read, parse and write failures propagate and end the process.
    result = NullableFixer().fix_file(openapi_path)

    click.echo(f"Fixed {openapi_path} ({result.merged_count} nullable unions rewritten)")


if __name__ == '__main__':
    main()
