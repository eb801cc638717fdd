"""Command line interface for orbit-node-config library."""

import sys
from pathlib import Path
from typing import Optional

import click
from dotenv import find_dotenv, load_dotenv
from rich.markup import escape
from rich.table import Table

from .chains import supported_parent_chains
from .environment import load_environment
from .exceptions import NodeConfigError
from .generate import generate_and_write_configs
from .log import get_console, setup_logger
from .node_config import get_disable_blob_reader
from .parsers import parse_deployment_result
from .rpc import verify_chain_id

console = get_console()


@click.group()
def cli() -> None:
    """Derive Nitro node configs for Avail-backed Orbit chains."""


@cli.command("generate")
@click.option(
    "--deployment",
    "deployment_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Rollup deployment result JSON",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for nodeConfig.json and orbitSetupScriptConfig.json",
)
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Load environment variables from this file instead of ./.env",
)
@click.option(
    "--verify-rpc/--no-verify-rpc",
    default=False,
    show_default=True,
    help="Check that PARENT_CHAIN_RPC serves PARENT_CHAIN_ID",
)
@click.option("--verbose", is_flag=True, default=False)
def generate_cmd(
    deployment_path: Path,
    output_dir: Optional[Path],
    env_file: Optional[Path],
    verify_rpc: bool,
    verbose: bool,
) -> None:
    """Write the node config and Orbit setup script config for a deployed rollup."""
    logger = setup_logger(verbose)
    load_dotenv(env_file or find_dotenv(usecwd=True))

    try:
        environment = load_environment()
        if verify_rpc:
            logger.info(f"Verifying parent chain RPC {environment.parent_chain_rpc_url}")
            verify_chain_id(environment.parent_chain_rpc_url, environment.parent_chain_id)
        deployment = parse_deployment_result(deployment_path)
        node_config_path, setup_script_config_path = generate_and_write_configs(
            environment, deployment, output_dir
        )
    except (NodeConfigError, ValueError, RuntimeError, OSError) as e:
        console.print(f"[red]✘ Config generation failed: {escape(str(e))}[/]")
        sys.exit(1)

    console.print(f"[green]✔[/] Node config          : {node_config_path}")
    console.print(f"[green]✔[/] Setup script config  : {setup_script_config_path}")


@cli.command("parent-chains")
def parent_chains_cmd() -> None:
    """List supported parent chains."""
    table = Table(title="Supported parent chains")
    table.add_column("Chain ID", justify="right")
    table.add_column("Name")
    table.add_column("Layer", justify="right")
    table.add_column("Arbitrum")
    table.add_column("Disable blob reader")

    for chain in supported_parent_chains():
        disable_blob_reader = get_disable_blob_reader(chain.chain_id)
        table.add_row(
            str(chain.chain_id),
            chain.name,
            str(chain.layer),
            "yes" if chain.is_arbitrum else "no",
            "yes" if disable_blob_reader else "no",
        )

    console.print(table)


if __name__ == "__main__":
    cli()
