#!/usr/bin/env python3
"""
Dependency Lister CLI

Print every file listed as a dependency by the compiler-generated .d files
found under a directory, with symbolic links resolved.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from depscan.builder import build_report, collect_dependencies
from depscan.config import ASCII_STYLES, DEFAULT_CONFIG, OUTPUT_FORMATS, load_config
from depscan.errors import ConfigError, DependencyListerError
from exporters import to_ascii, to_json, to_plain


EXIT_OK = 0
EXIT_USAGE = 1
EXIT_SCAN_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="dependency-lister",
        description="Print all the dependencies noted in .d files from a directory.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dependency-lister build/                 # One dependency per line
  dependency-lister build/ -f json         # JSON with a per-.d-file breakdown
  dependency-lister build/ -f tree         # Tree of .d files and dependencies
  dependency-lister build/ --suffix .dep   # Scan files ending in .dep
  dependency-lister build/ -c lister.yaml  # Defaults from a config file
        """,
    )

    # Positional arguments; exactly one is expected, checked in main()
    parser.add_argument(
        "directory",
        nargs="*",
        help="Directory to scan for .d files",
    )

    # Output options
    parser.add_argument(
        "-f", "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: plain)",
    )

    parser.add_argument(
        "--ascii-style",
        choices=ASCII_STYLES,
        default=None,
        help="Tree output style: 'tree' (Unicode) or 'ascii' (pure ASCII)",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    # Scanning options
    parser.add_argument(
        "--suffix",
        type=str,
        default=None,
        help="Suffix of the dependency files to parse (default: .d)",
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="YAML, TOML or JSON file providing defaults for these options",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log scanning progress to stderr",
    )

    return parser


def parse_args(args=None):
    """Parse command line arguments."""
    return build_parser().parse_args(args)


def resolve_options(parsed: argparse.Namespace) -> Dict[str, Any]:
    """
    Merge the config file (if any) with the command line.

    Options given on the command line win over the config file.

    Raises:
        ConfigError: If the config file is invalid.
    """
    if parsed.config:
        options = load_config(Path(parsed.config))
    else:
        options = dict(DEFAULT_CONFIG)

    for key in ("format", "ascii_style", "output", "suffix"):
        value = getattr(parsed, key)
        if value is not None:
            options[key] = value
    if parsed.verbose:
        options["verbose"] = True

    if not options["suffix"]:
        raise ConfigError("<command line>", "'suffix' must not be empty")
    return options


def render(directory: str, options: Dict[str, Any]) -> str:
    """
    Scan ``directory`` and format the result.

    Raises:
        DependencyListerError: If the scan fails.
    """
    suffix = options["suffix"]

    if options["format"] == "json":
        return to_json(build_report(directory, suffix))
    elif options["format"] == "tree":
        return to_ascii(build_report(directory, suffix), style=options["ascii_style"])
    else:  # plain (default)
        return to_plain(collect_dependencies(directory, suffix))


def main(args=None):
    """Main entry point."""
    parser = build_parser()
    parsed = parser.parse_args(args)

    if not parsed.directory:
        parser.print_help()
        return EXIT_OK
    if len(parsed.directory) > 1:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    try:
        options = resolve_options(parsed)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=logging.DEBUG if options["verbose"] else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        output = render(parsed.directory[0], options)
    except DependencyListerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SCAN_FAILED

    # Write output
    if options["output"]:
        try:
            output_path = Path(options["output"])
            output_path.write_text(output + "\n" if output else "", encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return EXIT_USAGE
    elif output:
        print(output)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
