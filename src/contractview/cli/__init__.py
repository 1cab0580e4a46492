"""Command-line interface for contractview.

Renders a contract document (JSON or YAML) to HTML.

Examples
--------
Render to stdout::

    $ contractview contract.json

Write a standalone page::

    $ contractview contract.yaml --standalone --title "Service Agreement" -o contract.html

Fill in mention values, as if a user had edited them::

    $ contractview contract.json --set party=Globex --set date=2025-01-01

Show the seeded mention values::

    $ contractview contract.json --dump-mentions

Configuration files (``.contractview.toml`` and friends) are discovered from
the current directory upwards; ``CONTRACTVIEW_CONFIG`` names one explicitly.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from contractview.ast.serialization import load_nodes, nodes_from_json
from contractview.cli.config import discover_config_file, load_config_file, options_from_config
from contractview.constants import CONFIG_ENV_VAR
from contractview.exceptions import ParsingError, RenderingError, ValidationError
from contractview.options.contract import ContractRendererOptions
from contractview.renderers.contract import ContractRenderer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 1
EXIT_OUTPUT_ERROR = 3

LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"

__all__ = ["create_parser", "main", "parse_assignment"]


def parse_assignment(text: str) -> tuple[str, str]:
    """Parse an ``ID=VALUE`` argument.

    Raises
    ------
    argparse.ArgumentTypeError
        If there is no ``=`` or the id is empty

    """
    mention_id, sep, value = text.partition("=")
    mention_id = mention_id.strip()
    if not sep or not mention_id:
        raise argparse.ArgumentTypeError(f"Expected ID=VALUE, got {text!r}")
    return mention_id, value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``contractview`` command."""
    parser = argparse.ArgumentParser(
        prog="contractview",
        description="Render a contract document to HTML, keeping mention values synchronized.",
    )
    parser.add_argument("input", help="Input document (.json, .yaml, .yml), or '-' for JSON on stdin")
    parser.add_argument("-o", "--out", help="Output file (default: stdout)")
    parser.add_argument(
        "--set",
        dest="assignments",
        action="append",
        type=parse_assignment,
        default=[],
        metavar="ID=VALUE",
        help="Set a mention value after seeding; may be repeated",
    )
    parser.add_argument("--standalone", action="store_true", default=None, help="Write a complete HTML page")
    parser.add_argument("--title", help="Page title in standalone mode")
    parser.add_argument(
        "--static-mentions",
        action="store_true",
        help="Render every mention as static content instead of an input",
    )
    parser.add_argument(
        "--dump-mentions",
        action="store_true",
        help="Print the mention values as JSON instead of rendering HTML",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help=f"Configuration file (default: discovered, or ${CONFIG_ENV_VAR})")
    config_group.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    log_group.add_argument("--log-file", help="Also write log output to this file")
    log_group.add_argument("-v", "--verbose", action="store_true", help="Shortcut for --log-level DEBUG")
    log_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Configure root logging from the ``--log-level``, ``--verbose``, ``--trace`` and ``--log-file`` flags.

    Existing root handlers are replaced. A log file that cannot be opened
    is reported as a warning and logging continues on stderr only.
    """
    # --trace takes precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file_error: Optional[OSError] = None
    if parsed_args.log_file:
        try:
            handlers.append(logging.FileHandler(parsed_args.log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            log_file_error = e

    logging.basicConfig(
        level=log_level,
        format=TRACE_LOG_FORMAT if parsed_args.trace else LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
    if log_file_error is not None:
        logger.warning("Could not open log file %s: %s", parsed_args.log_file, log_file_error)


def _resolve_config_path(parsed_args: argparse.Namespace) -> Optional[Path]:
    if parsed_args.no_config:
        return None
    if parsed_args.config:
        return Path(parsed_args.config)
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)
    return discover_config_file()


def build_options(parsed_args: argparse.Namespace) -> ContractRendererOptions:
    """Combine configuration file values with command-line overrides.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration file is invalid

    """
    options = ContractRendererOptions()
    config_path = _resolve_config_path(parsed_args)
    if config_path is not None:
        logger.debug("Using configuration file %s", config_path)
        options = options_from_config(load_config_file(config_path), options)

    overrides: dict[str, object] = {}
    if parsed_args.standalone is not None:
        overrides["standalone"] = parsed_args.standalone
    if parsed_args.title is not None:
        overrides["title"] = parsed_args.title
    if parsed_args.static_mentions:
        overrides["editable_mentions"] = False
    return options.create_updated(**overrides) if overrides else options


def _read_input(source: str):
    if source == "-":
        return nodes_from_json(sys.stdin.read(), source="<stdin>")
    return load_nodes(source)


def _emit(text: str, out: Optional[str]) -> None:
    if out:
        output_path = Path(out)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        ContractRenderer.write_text_output(text, output_path)
    else:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")


def main(args: list[str] | None = None) -> int:
    """Execute the contractview command."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    try:
        options = build_options(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        nodes = _read_input(parsed_args.input)
    except ParsingError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    renderer = ContractRenderer(options)
    renderer.load(nodes)
    try:
        for mention_id, value in parsed_args.assignments:
            renderer.on_mention_edit(mention_id, value)
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if parsed_args.dump_mentions:
        text = json.dumps(dict(renderer.store.read()), indent=2, ensure_ascii=False)
    else:
        text = renderer.render_to_string()

    try:
        _emit(text, parsed_args.out)
    except (RenderingError, OSError) as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_OUTPUT_ERROR
    return EXIT_SUCCESS
