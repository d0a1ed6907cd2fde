"""samplerctl — CLI entry point for sampler parameters in a UI snapshot.

Each command loads the panel snapshot, runs one sampler command against it
and, for ``set --save``, writes the mutated tree back.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from samplerctl.cli.formatter import format_parameter_list, output, output_error
from samplerctl.command.executor import ActionExecutor
from samplerctl.command.puppeteer import CommandDispatcher
from samplerctl.config import get_sampler_config
from samplerctl.control.inspector import ParameterEnumerator
from samplerctl.tree import UIDocument


def _load_document(ctx: click.Context) -> UIDocument:
    """Load the snapshot once per invocation."""
    if ctx.obj.get("document") is None:
        ctx.obj["document"] = UIDocument.load(ctx.obj["snapshot"])
    return ctx.obj["document"]


def _run(ctx: click.Context, command_name: str, params: dict, unnamed: Optional[str]) -> str:
    """Execute a command, exiting with status 1 on failure."""
    dispatcher = CommandDispatcher(_load_document(ctx), get_sampler_config())
    result = ActionExecutor(dispatcher).execute(command_name, params, unnamed)
    if not result.ok:
        output_error(result.error, ctx.obj["json"])
        sys.exit(1)
    return result.result


# ============================================================================
# CLI Group
# ============================================================================


@click.group()
@click.option(
    "--snapshot",
    "snapshot",
    required=True,
    envvar="SAMPLERCTL_SNAPSHOT",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON snapshot of the UI tree (or set SAMPLERCTL_SNAPSHOT)",
)
@click.option("--json", "output_json", is_flag=True, help="JSON output mode")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, snapshot: str, output_json: bool, verbose: bool):
    """samplerctl — read and write sampler parameters of a chat UI settings panel.

    Typical workflow:
        samplerctl --snapshot panel.json list
        samplerctl --snapshot panel.json get temperature
        samplerctl --snapshot panel.json set --name temp 1.1 --save
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["snapshot"] = snapshot
    ctx.obj["json"] = output_json
    ctx.obj["document"] = None


# ============================================================================
# Commands
# ============================================================================


@cli.command("list")
@click.option("--sorted", "sort_by_name", is_flag=True, help="Sort by name instead of panel order")
@click.pass_context
def list_cmd(ctx, sort_by_name: bool):
    """List the sampler parameters visible in the panel."""
    try:
        enumerator = ParameterEnumerator(_load_document(ctx), get_sampler_config())
        parameters = enumerator.enumerate()
        if sort_by_name:
            parameters.sort(key=lambda p: p.name.lower())
        as_json = ctx.obj["json"]
        output(format_parameter_list(parameters, as_json=as_json), as_json=as_json)
    except Exception as e:
        output_error(str(e), ctx.obj["json"])
        sys.exit(1)


@cli.command("suggest")
@click.argument("command_name", default="sampler-get")
@click.pass_context
def suggest_cmd(ctx, command_name: str):
    """Show name completions a command offers."""
    try:
        dispatcher = CommandDispatcher(_load_document(ctx), get_sampler_config())
        suggestions = dispatcher.suggestions_for(command_name)
        if ctx.obj["json"]:
            output([s.model_dump() for s in suggestions], as_json=True)
        else:
            output([f"{s.value}\t{s.label}\t({s.icon})" for s in suggestions])
    except Exception as e:
        output_error(str(e), ctx.obj["json"])
        sys.exit(1)


@cli.command("get")
@click.argument("name")
@click.pass_context
def get_cmd(ctx, name: str):
    """Get the value of a sampling parameter."""
    value = _run(ctx, "sampler-get", {}, name)
    output(value, as_json=ctx.obj["json"])


@cli.command("set", context_settings={"ignore_unknown_options": True})
@click.option("--name", "name", required=True, help="The name or id of the parameter to set")
@click.argument("value")
@click.option("--save", is_flag=True, help="Write the updated tree back to the snapshot")
@click.pass_context
def set_cmd(ctx, name: str, value: str, save: bool):
    """Set the value of a sampling parameter."""
    _run(ctx, "sampler-set", {"name": name}, value)
    if save:
        _load_document(ctx).dump(ctx.obj["snapshot"])
    output("OK", as_json=ctx.obj["json"])


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
