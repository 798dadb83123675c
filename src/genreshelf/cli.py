"""
genreshelf CLI interface
Command-line tools for running the server and managing the catalog
"""
import click
from genreshelf.errors import ConfigurationError
from genreshelf.main import run_server
from genreshelf.services.catalog_service import CatalogService
from genreshelf.services.database_service import DatabaseService
from genreshelf.utils.config import Config


def _load_config():
    try:
        return Config()
    except ConfigurationError as e:
        raise click.ClickException(str(e))


@click.group()
@click.pass_context
def cli(ctx):
    """genreshelf - browse genres and keep a reading list"""
    ctx.ensure_object(dict)


@cli.command()
@click.option('--host', default=None, help='Host to bind (overrides GENRESHELF_HOST)')
@click.option('--port', default=None, type=int, help='Port to bind (overrides GENRESHELF_PORT)')
def serve(host, port):
    """Run the web server"""
    config = _load_config()
    if host:
        config.HOST = host
    if port:
        config.PORT = port

    run_server(config)


@cli.command()
@click.pass_context
def seed(ctx):
    """Seed the genre catalog if it is empty"""
    config = _load_config()
    database = DatabaseService(config, mongo_client_class=ctx.obj.get('mongo_client_class'))
    database.connect()
    try:
        if CatalogService(config).seed_if_empty():
            click.echo("Catalog seeded")
        else:
            click.echo("Catalog already populated, nothing to do")
    finally:
        database.disconnect()


if __name__ == '__main__':
    cli()
