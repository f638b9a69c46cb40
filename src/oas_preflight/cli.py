"""Command-line entry point: ``oas-preflight <spec.json> [--json]``"""

import logging
import sys

import click

from oas_preflight.config import get_settings
from oas_preflight.core import exit_code, render_json, render_text, run_preflight
from oas_preflight.core.report import EXIT_FATAL

logger = logging.getLogger(__name__)

EPILOG = """\b
Requirements:
  npm install -g @stoplight/spectral-cli

Exit codes: 0 passed, 1 validation errors, 2 file or engine error.
"""


def _configure_logging(verbose: bool, level: str) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
)
@click.argument("spec_path", required=False)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON.")
@click.option(
    "--ruleset",
    type=click.Path(dir_okay=False, exists=True),
    default=None,
    help="Spectral ruleset to use instead of the packaged one.",
)
@click.option(
    "--max-size-kb",
    type=float,
    default=None,
    help="Upload size limit in KB (default: 500).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    spec_path: str | None,
    json_output: bool,
    ruleset: str | None,
    max_size_kb: float | None,
    verbose: bool,
) -> None:
    """Validate an OpenAPI document against the upload platform's rules.

    Runs the required-field and naming checks, then Spectral with the
    platform ruleset, so documents that pass here should import cleanly.
    """
    if spec_path is None:
        options_given = json_output or verbose or ruleset is not None or max_size_kb is not None
        if not options_given:
            click.echo(ctx.get_help())
            ctx.exit(0)
        click.echo("Error: No spec file provided", err=True)
        ctx.exit(EXIT_FATAL)

    settings = get_settings()
    if max_size_kb is not None:
        settings = settings.model_copy(update={"max_size_kb": max_size_kb})

    _configure_logging(verbose, settings.log_level)

    try:
        result = run_preflight(spec_path, settings=settings, ruleset_path=ruleset)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        click.echo(f"Unexpected error: {e}", err=True)
        ctx.exit(EXIT_FATAL)

    if json_output:
        click.echo(render_json(result))
    else:
        click.echo(
            render_text(
                result,
                spec_path,
                max_size_kb=settings.max_size_kb,
                max_warnings=settings.max_warnings_shown,
            )
        )

    ctx.exit(exit_code(result))


if __name__ == "__main__":
    main()
