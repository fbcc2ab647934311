import logging
import traceback
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from otterts.codegen.codegen import Codegen
from otterts.codegen.emitter import StringEmitter
from otterts.config import DocumentConfig, get_config

console = Console()
app = typer.Typer(
    name='otterts',
    help='Generate TypeScript declarations from OpenAPI schemas',
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )


@app.command()
def generate(
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging')
    ] = False,
) -> None:
    """Generate declarations for every document in the configuration.

    If no config file is specified, will look for default config files
    in the current directory or the [tool.otterts] table of pyproject.toml.

    Examples:
        otterts generate
        otterts generate --config my-config.yaml
        otterts generate -c config.json
    """
    _configure_logging(verbose)

    try:
        codegen_config = get_config(config)
        written: list[str] = []

        for document_config in codegen_config.documents:
            with Progress(
                SpinnerColumn(),
                TextColumn('[progress.description]{task.description}'),
                console=console,
            ) as progress:
                task = progress.add_task(
                    f'Generating {document_config.output} from {document_config.source}...',
                    total=None,
                )

                codegen = Codegen(document_config)
                written.append(codegen.generate())

                progress.update(
                    task, description=f'Done with {document_config.source}!'
                )

        console.print('[green]Successfully generated declarations[/green]')
        console.print('[dim]Generated files:[/dim]')
        for path in written:
            console.print(f'  - {path}')

    except Exception as e:
        console.print(f'[red]Error:[/red] {e}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)


@app.command()
def convert(
    source: Annotated[str, typer.Argument(help='Path or URL of the schema document')],
    output: Annotated[
        str | None,
        typer.Option('--output', '-o', help='Write declarations to this file'),
    ] = None,
    raw_schema: Annotated[
        bool,
        typer.Option('--raw-schema', help='Treat the input as a flat map of schemas'),
    ] = False,
    property_mapper: Annotated[
        str | None,
        typer.Option(
            '--property-mapper', help="Property mapper as 'module:function'"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging')
    ] = False,
) -> None:
    """Convert a single schema document.

    Examples:
        otterts convert ./openapi.yaml
        otterts convert ./openapi.yaml -o ./types/api.ts
        otterts convert ./schemas.json --raw-schema
    """
    _configure_logging(verbose)

    document_config = DocumentConfig(
        source=source,
        output=output or 'schema.ts',
        raw_schema=raw_schema,
        property_mapper=property_mapper,
    )

    try:
        if output:
            path = Codegen(document_config).generate()
            console.print(f'[green]Wrote[/green] {path}')
        else:
            codegen = Codegen(document_config, emitter=StringEmitter())
            typer.echo(codegen.render())
    except Exception as e:
        console.print(f'[red]Error:[/red] {e}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of otterts."""
    from otterts import __version__

    console.print(f'otterts version: {__version__}')


if __name__ == '__main__':
    app()
