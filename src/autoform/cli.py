"""CLI main entry point."""

import json
import logging

import click

from .config import Config
from .errors import AutoformException
from .inference import infer
from .introspection import introspect
from .log import setup as setup_log

logger = logging.getLogger(__name__)


def load_config(ctx) -> Config:
    """Load configuration once per invocation and set up logging."""
    if "config" not in ctx.obj:
        cfg = Config.load(ctx.obj["config_path"])
        level = logging.DEBUG if ctx.obj["verbose"] else logging.WARNING
        setup_log(cfg.log_file, level=level)
        ctx.obj["config"] = cfg
    return ctx.obj["config"]


def read_json(stream):
    try:
        return json.load(stream)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON input: {e}")


def echo_json(data):
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@click.group()
@click.option(
    "--config",
    "-c",
    "config_path",
    default=None,
    help="Configuration file path (defaults to autoform.toml when present)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log degraded inference and introspection paths")
@click.pass_context
def cli(ctx, config_path, verbose: bool):
    """Infer schemas from example data and derive form field descriptors."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


@cli.command(name="infer")
@click.argument("input_file", type=click.File("r"), default="-")
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=None,
    help="Override inference.max_depth from config",
)
@click.pass_context
def infer_command(ctx, input_file, max_depth):
    """Print the schema tree inferred from a JSON example."""
    try:
        cfg = load_config(ctx)
        value = read_json(input_file)
        depth = cfg.inference.max_depth if max_depth is None else max_depth
        node = infer(value, max_depth=depth)
        echo_json(node.model_dump(mode="json"))
    except AutoformException as e:
        logger.error(f"Inference failed: {e}")
        raise click.ClickException(str(e))


@cli.command(name="introspect")
@click.argument("input_file", type=click.File("r"), default="-")
@click.option(
    "--from-example",
    is_flag=True,
    help="Treat the input as example data and infer its schema first",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=None,
    help="Override inference.max_depth from config (with --from-example)",
)
@click.pass_context
def introspect_command(ctx, input_file, from_example: bool, max_depth):
    """Print the field descriptors of a JSON schema description."""
    try:
        cfg = load_config(ctx)
        data = read_json(input_file)
        if from_example:
            depth = cfg.inference.max_depth if max_depth is None else max_depth
            data = infer(data, max_depth=depth)

        fields = introspect(data, cfg.overrides)
        echo_json([field.to_dict() for field in fields])
    except AutoformException as e:
        logger.error(f"Introspection failed: {e}")
        raise click.ClickException(str(e))


@cli.command(name="serve")
@click.option("--host", "-h", default=None, help="Override host from config")
@click.option("--port", "-p", default=None, type=int, help="Override port from config")
@click.pass_context
def serve(ctx, host, port):
    """Start the HTTP API server."""
    try:
        cfg = load_config(ctx)
    except AutoformException as e:
        raise click.ClickException(str(e))

    import uvicorn

    from .api import create_app

    host = host or cfg.web.host
    port = port or cfg.web.port

    logger.warning(f"Starting API server on {host}:{port}")
    uvicorn.run(create_app(cfg), host=host, port=port)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
