"""CLI entry point for sls-openapi-models."""

from pathlib import Path

import click
import yaml

from sls_openapi_models.config import load_service
from sls_openapi_models.errors import SlsOpenApiModelsError
from sls_openapi_models.host import Serverless
from sls_openapi_models.openapi.finalizer import DocumentFinalizer
from sls_openapi_models.plugin import GENERATE_EVENT, OpenApiTypeScriptPlugin


@click.group()
def main():
    """sls-openapi-models: document Serverless http functions from TypeScript types."""
    pass


@main.command()
@click.argument("config_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output path for the enriched service config.")
@click.option("--typescript-api-path", default=None, help="TypeScript declaration file with the API types (default: api.d.ts).")
@click.option("--tsconfig-path", default=None, help="tsconfig used to compile the declarations (default: tsconfig.json).")
def models(config_path: Path, output: Path, typescript_api_path: str | None, tsconfig_path: str | None):
    """Add documentation models to every http function of a service."""
    click.echo(f"Reading {config_path}...")
    try:
        service = load_service(config_path)
        serverless = Serverless(service, options={
            "typescriptApiPath": typescript_api_path,
            "tsconfigPath": tsconfig_path,
        })
        # the OpenAPI document itself is generated by a separate tool from our output
        serverless.plugin_manager.register(GENERATE_EVENT, lambda: None)

        plugin = OpenApiTypeScriptPlugin(serverless)
        if not plugin.disabled:
            plugin.populate_serverless_with_models()
    except SlsOpenApiModelsError as e:
        raise click.ClickException(str(e)) from e

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(yaml.safe_dump(service, sort_keys=False, allow_unicode=True), encoding="utf-8")
    if plugin.disabled:
        click.echo(f"Wrote unchanged service config to {output}")
        return
    count = len(service["custom"]["documentation"].get("models", []))
    click.echo(f"Wrote {count} models to {output}")


@main.command()
@click.argument("openapi_path", type=click.Path(exists=True, path_type=Path))
def finalize(openapi_path: Path):
    """Set the OpenAPI version and tag every operation of a generated document."""
    try:
        document = DocumentFinalizer(log=click.echo).finalize(openapi_path)
    except SlsOpenApiModelsError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Tagged {openapi_path} with '{document['tags'][0]['name']}'")
