"""CLI entry point for converting elm-test labels, paths and locations."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from elm_test_labels.codec import LabelCodecError
from elm_test_labels.labels import common_parent, diff_paths, to_labels, to_path
from elm_test_labels.location import (
    ELM_TEST_PROTOCOL,
    LOCATION_SEPARATOR,
    LocationUrlError,
    parse_location_url,
    to_location_url,
)
from elm_test_labels.models.path import LabelPath
from elm_test_labels.module_file import ResolverConfig, module_file_path

log = logging.getLogger("elm_test_labels")


def run(args: argparse.Namespace) -> int:
    """Run the selected command and return the exit code."""
    config = ResolverConfig(tests_root=args.tests_root, extension=args.extension)
    try:
        output = execute(args.command, args, config)
    except (LabelCodecError, LocationUrlError) as exc:
        log.error("%s", exc)
        return 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def execute(
    command: str, args: argparse.Namespace, config: ResolverConfig
) -> dict[str, Any]:
    """Compute the JSON output of a single command."""
    log.debug("Running command %s", command)
    match command:
        case "path":
            return {"path": str(to_path(args.labels))}
        case "labels":
            return {"labels": list(to_labels(LabelPath.from_string(args.path)))}
        case "location":
            return {"url": to_location_url(args.module, args.label)}
        case "resolve":
            return resolve(args.location, config)
        case "common-parent":
            parent = common_parent(
                LabelPath.from_string(args.first), LabelPath.from_string(args.second)
            )
            return {"path": str(parent)}
        case "diff":
            diff = diff_paths(
                LabelPath.from_string(args.source), LabelPath.from_string(args.target)
            )
            return {"path": str(diff)}
        case "module-file":
            return {"module_file": module_file_path(args.module, config)}
    raise ValueError(f"Unknown command: {command}")  # pragma: no cover


def resolve(location: str, config: ResolverConfig) -> dict[str, Any]:
    """Resolve a full location URL, or the path part of one."""
    if LOCATION_SEPARATOR not in location:
        location = f"{ELM_TEST_PROTOCOL}{LOCATION_SEPARATOR}{location}"
    return parse_location_url(location, config).model_dump()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per conversion."""
    parser = argparse.ArgumentParser(
        description="Convert elm-test labels to paths and location URLs"
    )
    parser.add_argument(
        "--tests-root",
        default="tests",
        help="Folder holding test modules (default: tests)",
    )
    parser.add_argument(
        "--extension",
        default=".elm",
        help="Source file extension of test modules (default: .elm)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    path_cmd = commands.add_parser("path", help="Encode labels into a path")
    path_cmd.add_argument("labels", nargs="*", help="Module, describe and test labels")

    labels_cmd = commands.add_parser("labels", help="Decode a path into labels")
    labels_cmd.add_argument("path", help="Path produced by the path command")

    location_cmd = commands.add_parser("location", help="Build a location URL")
    location_cmd.add_argument("module", help="Dotted module name")
    location_cmd.add_argument("label", help="Label of the test result")

    resolve_cmd = commands.add_parser(
        "resolve", help="Resolve a location URL to module file and label"
    )
    resolve_cmd.add_argument("location", help="Location URL or its path part")

    parent_cmd = commands.add_parser(
        "common-parent", help="Longest common ancestor of two paths"
    )
    parent_cmd.add_argument("first", help="First path")
    parent_cmd.add_argument("second", help="Second path")

    diff_cmd = commands.add_parser(
        "diff", help="Express a path relative to the parent of another"
    )
    diff_cmd.add_argument("source", help="Path whose parent is the base")
    diff_cmd.add_argument("target", help="Path to express relatively")

    module_cmd = commands.add_parser(
        "module-file", help="Conventional source file of a module"
    )
    module_cmd.add_argument("module", help="Dotted module name")

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(args))


if __name__ == "__main__":  # pragma: no cover
    main()
