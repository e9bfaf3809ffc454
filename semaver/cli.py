"""
Command line interface for semaver.
"""

import argparse
import json
import sys
from typing import List, Optional

from .comparator import SemanticVersionComparator, compare
from .config import LOG_LEVELS, OUTPUT_FORMATS, Config, get_default_config_path, load_config
from .exceptions import ConfigurationError, MalformedVersion, SemaverError
from .logging_config import get_logger, setup_logging
from .models import Level, Ordering, Version
from .parser import try_parse
from .version import get_full_name_with_version

logger = get_logger('cli')

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2

SYMBOLS = {
    Ordering.LESS: '<',
    Ordering.EQUAL: '=',
    Ordering.GREATER: '>',
}


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the semaver command."""
    parser = argparse.ArgumentParser(
        prog='semaver',
        description='Parse, compare, sort and bump Semantic Versioning 2.0.0 version numbers.',
    )
    parser.add_argument('--version', action='version', version=get_full_name_with_version())
    parser.add_argument('--config', help='Path to YAML configuration file')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, help='Output format (default: text)')
    parser.add_argument('--strict', action='store_true',
                        help="Reject a leading 'v' on version strings")
    parser.add_argument('--log-level', choices=LOG_LEVELS, type=str.upper, help='Logging level')
    parser.add_argument('--log-file', help='Write a debug log to this file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose log format')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    parse_cmd = subparsers.add_parser('parse', help='Show the components of a version')
    parse_cmd.add_argument('version')
    parse_cmd.set_defaults(handler=_cmd_parse)

    compare_cmd = subparsers.add_parser('compare', help='Compare two versions by precedence')
    compare_cmd.add_argument('left')
    compare_cmd.add_argument('right')
    compare_cmd.set_defaults(handler=_cmd_compare)

    sort_cmd = subparsers.add_parser('sort', help='Sort versions by precedence')
    sort_cmd.add_argument('versions', nargs='+')
    sort_cmd.add_argument('-r', '--reverse', action='store_true', help='Highest precedence first')
    sort_cmd.add_argument('--skip-invalid', action='store_true', help='Drop malformed versions')
    sort_cmd.set_defaults(handler=_cmd_sort)

    latest_cmd = subparsers.add_parser('latest', help='Print the version with the highest precedence')
    latest_cmd.add_argument('versions', nargs='+')
    latest_cmd.set_defaults(handler=_cmd_latest)

    bump_cmd = subparsers.add_parser('bump', help='Increment a version')
    bump_cmd.add_argument('version')
    bump_cmd.add_argument('level', choices=[level.value for level in Level])
    bump_cmd.add_argument('-n', type=_non_negative_int, default=1, help='Amount to add (default: 1)')
    bump_cmd.set_defaults(handler=_cmd_bump)

    validate_cmd = subparsers.add_parser('validate', help='Check that versions are well formed')
    validate_cmd.add_argument('versions', nargs='+')
    validate_cmd.set_defaults(handler=_cmd_validate)

    return parser


def _describe(version: Version) -> dict:
    return {
        "version": version.to_string(),
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": version.prerelease_identifiers,
        "build": version.build_identifiers,
    }


def _emit(args, data, text: str) -> None:
    if args.format == 'json':
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        print(text)


def _cmd_parse(args, comparator: SemanticVersionComparator) -> int:
    version = comparator.parse_version(args.version)
    data = _describe(version)
    lines = [
        f"major:      {version.major}",
        f"minor:      {version.minor}",
        f"patch:      {version.patch}",
        f"prerelease: {version.prerelease}",
        f"build:      {version.build}",
    ]
    _emit(args, data, "\n".join(lines))
    return EXIT_OK


def _cmd_compare(args, comparator: SemanticVersionComparator) -> int:
    result = compare(comparator.parse_version(args.left), comparator.parse_version(args.right))
    data = {"left": args.left, "right": args.right, "result": result.value}
    _emit(args, data, SYMBOLS[result])
    return EXIT_OK


def _cmd_sort(args, comparator: SemanticVersionComparator) -> int:
    ordered = comparator.sort_versions(args.versions, reverse=args.reverse, skip_invalid=args.skip_invalid)
    _emit(args, ordered, "\n".join(ordered))
    return EXIT_OK


def _cmd_latest(args, comparator: SemanticVersionComparator) -> int:
    latest = comparator.get_latest_version(args.versions)
    if latest is None:
        print("Error: no valid version given", file=sys.stderr)
        return EXIT_INVALID
    _emit(args, {"latest": latest}, latest)
    return EXIT_OK


def _cmd_bump(args, comparator: SemanticVersionComparator) -> int:
    version = comparator.parse_version(args.version)
    bumped = version.bumped(args.level, args.n)
    logger.debug(f"Bumped {version} by {args.n} {args.level} to {bumped}")
    _emit(args, {"previous": version.to_string(), "version": bumped.to_string()}, bumped.to_string())
    return EXIT_OK


def _cmd_validate(args, comparator: SemanticVersionComparator) -> int:
    results = []
    lines = []
    for text in args.versions:
        result = try_parse(text, allow_prefix=comparator.allow_prefix)
        if result.ok:
            results.append({"version": text, "valid": True})
            lines.append(f"valid:   {text}")
        else:
            results.append({"version": text, "valid": False, "error": result.error.reason})
            lines.append(f"invalid: {text} ({result.error.reason})")

    _emit(args, results, "\n".join(lines))
    return EXIT_OK if all(item["valid"] for item in results) else EXIT_INVALID


def _resolve_config(args) -> Config:
    config = load_config(args.config or get_default_config_path())

    if args.format:
        config.output.default_format = args.format
    if args.strict:
        config.parser.allow_prefix = False
    if args.log_level:
        config.logging.level = args.log_level
    if args.log_file:
        config.logging.log_file = args.log_file
    if args.verbose:
        config.logging.verbose = True

    return config


def _setup_logging(config: Config) -> None:
    try:
        setup_logging(config.logging.level, config.logging.log_file, config.logging.verbose)
    except OSError as e:
        raise ConfigurationError(f"Cannot open log file: {e}", file_path=config.logging.log_file)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the semaver command line tool.

    Args:
        argv: Arguments without the program name, defaults to sys.argv[1:]

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    try:
        config = _resolve_config(args)
        _setup_logging(config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    args.format = config.output.default_format

    comparator = SemanticVersionComparator(allow_prefix=config.parser.allow_prefix)

    try:
        return args.handler(args, comparator)
    except MalformedVersion as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID
    except SemaverError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
