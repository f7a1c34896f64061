# ymldiff v1.0.0
#!/usr/bin/env python3
"""
ymldiff - A smart YAML diff tool with semantic comparison

Command-line interface for comparing two YAML files.
"""
import argparse
import logging
import os
import sys

EXAMPLES = """\
examples:
    # Basic comparison
    ymldiff old.yaml new.yaml

    # Compare without showing comments
    ymldiff -c config1.yaml config2.yaml

    # Compare without document separator comments
    ymldiff -d config1.yaml config2.yaml

    # Compare without colors (for piping to files or logs)
    ymldiff -n config1.yaml config2.yaml

    # Combine options
    ymldiff -cdn config1.yaml config2.yaml
"""


def should_use_color(no_color: bool = False) -> bool:
    """Color only for an interactive stdout, unless disabled."""
    if no_color:
        return False
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def setup_logging(level: str, verbose: bool = False):
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_parser(version: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ymldiff",
        description=(
            "ymldiff compares two YAML files by structure rather than text and "
            "shows additions, deletions and modifications."
        ),
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Old and new YAML files")
    parser.add_argument("-c", "--disable-comments", action="store_true",
                        help="Disable display of YAML comments in output")
    parser.add_argument("-d", "--no-doc-comment", action="store_true",
                        help="Disable document separator comments (--- # YAML Document: X/Y)")
    parser.add_argument("-n", "--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {version}")
    return parser


def main(argv=None) -> int:
    from config import load_settings
    from core import DocumentError, RenderOptions, compare_files

    settings = load_settings()
    parser = build_parser(settings.APP_VERSION)
    args = parser.parse_args(argv)

    setup_logging(settings.LOG_LEVEL, args.verbose)

    if len(args.files) != 2:
        print("Error: Expected exactly 2 YAML files to compare\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    options = RenderOptions(
        color=should_use_color(args.no_color or settings.NO_COLOR),
        show_comments=not (args.disable_comments or settings.DISABLE_COMMENTS),
        show_separators=not (args.no_doc_comment or settings.NO_DOC_COMMENT),
        indent=settings.INDENT,
    )

    old_path, new_path = args.files
    try:
        report = compare_files(old_path, new_path, options)
    except DocumentError as e:
        print(f"Error parsing {e.path}: {e.cause}", file=sys.stderr)
        return 1

    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
