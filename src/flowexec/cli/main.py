"""Flowexec CLI entry point."""

import json
import sys

import click

from ..context import FlowContext, pass_context, resolve_limits
from ..diagnostics import report, set_verbose
from ..executor import FlowExecutor
from ..explain import explain_target
from ..models import FlowError
from ..parser import parse_flow


def _usage_error() -> None:
    """Print the usage line and exit 1 (click's own usage errors exit 2)."""
    click.echo(click.get_current_context().get_usage(), err=True)
    sys.exit(1)


@click.command(
    context_settings=dict(
        help_option_names=["-h", "--help"], ignore_unknown_options=True
    )
)
@click.argument("args", nargs=-1, metavar="FLOW_FILE TARGET")
@click.option(
    "--explain",
    is_flag=True,
    help="Print the component tree for TARGET as JSON instead of running it",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    envvar="FLOWEXEC_VERBOSE",
    help="Trace process creation on stderr (or set $FLOWEXEC_VERBOSE)",
)
@click.option(
    "--max-components",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of components in the flow file "
    "(overrides $FLOWEXEC_MAX_COMPONENTS)",
)
@pass_context
def cli(ctx, args, explain, verbose, max_components):
    """Run the process tree rooted at TARGET in FLOW_FILE.

    FLOW_FILE holds one key=value declaration per line:

    \b
        node=greet
        command=echo hello
        node=shout
        command=tr a-z A-Z
        pipe=loud
        from=greet
        to=shout

    \b
    Examples:
        flowexec pipeline.flow loud            # prints HELLO
        flowexec --explain pipeline.flow loud  # show the tree, run nothing
    """
    if len(args) != 2:
        _usage_error()

    ctx.flow_file, ctx.target = args
    ctx.verbose = verbose
    set_verbose(verbose)

    try:
        ctx.limits = resolve_limits(max_components)
    except click.BadParameter as e:
        click.echo(f"Error: {e.format_message()}", err=True)
        sys.exit(1)

    try:
        registry = parse_flow(ctx.flow_file, ctx.limits)

        if explain:
            plan = explain_target(registry, ctx.target, ctx.limits)
            if plan.get("missing"):
                click.echo(f"Error: Target '{ctx.target}' not found", err=True)
                sys.exit(1)
            click.echo(json.dumps(plan, indent=2))
            return

        target = registry.find(ctx.target)
        if target is None:
            click.echo(f"Error: Target '{ctx.target}' not found", err=True)
            sys.exit(1)

        FlowExecutor(registry, ctx.limits).execute(target)

    except FlowError as e:
        report(e)
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli(prog_name="flowexec")


if __name__ == "__main__":
    main()
