#!/usr/bin/env python3
"""Convert an SVG file into a React component (.tsx/.jsx)."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_jsx.config import (
    EXPORT_STYLES,
    QUOTE_STYLES,
    ConversionOptions,
    parse_options_file,
)
from svg_jsx.convert import (
    component_name_from_path,
    convert_svg_file,
    format_conversion_report,
    output_filename,
)


def collect_overrides(args: argparse.Namespace) -> dict:
    """Collect option overrides given on the command line.

    Args:
        args: Parsed arguments.

    Returns:
        Mapping of ConversionOptions field names to values. Options that
        were not given are left out.
    """
    fields = {
        "typescript": args.typescript,
        "memo": args.memo,
        "pass_props": args.props,
        "minify": args.minify,
        "remove_ids": args.remove_ids,
        "omit_imports": args.omit_imports,
        "export_style": args.export_style,
        "export_name": args.export_name,
        "quotes": args.quotes,
        "optimize_svg": args.optimize,
        "use_formatter": args.format,
    }
    return {name: value for name, value in fields.items() if value is not None}


def main() -> int:
    """Main entry point.

    Returns:
        Exit code:
        - 0: Success
        - 1: I/O error
        - 2: Options file error
        - 3: Conversion error
    """
    parser = argparse.ArgumentParser(
        description="Convert an SVG file into a React component.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print a TypeScript component to stdout
  %(prog)s arrow-left.svg

  # Plain JSX with a default export, written to a directory
  %(prog)s arrow-left.svg --no-typescript --export-style default -o src/icons/

  # Options from a YAML file, with SVGO and Prettier enabled
  %(prog)s icon.svg --config svg-jsx.yaml --optimize --format -o Icon.tsx
""",
    )
    parser.add_argument("svg_file", type=Path, help="Path to SVG file to convert")
    parser.add_argument(
        "--name", "-n", help="Component name (default: derived from file name)"
    )
    parser.add_argument("--config", "-c", type=Path, help="Path to YAML options file")
    parser.add_argument(
        "--output", "-o", type=Path, help="Output file or directory (default: stdout)"
    )
    parser.add_argument(
        "--typescript", action=argparse.BooleanOptionalAction, help="Emit TypeScript"
    )
    parser.add_argument(
        "--memo", action=argparse.BooleanOptionalAction, help="Wrap in memo()"
    )
    parser.add_argument(
        "--props",
        action=argparse.BooleanOptionalAction,
        help="Spread props onto the root svg",
    )
    parser.add_argument(
        "--minify", action="store_true", default=None, help="Minify output"
    )
    parser.add_argument(
        "--remove-ids", action="store_true", default=None, help="Remove id attributes"
    )
    parser.add_argument(
        "--omit-imports",
        action="store_true",
        default=None,
        help="Do not emit import lines",
    )
    parser.add_argument("--export-style", choices=EXPORT_STYLES, help="Export form")
    parser.add_argument("--export-name", help="Export name for named exports")
    parser.add_argument("--quotes", choices=QUOTE_STYLES, help="Attribute quote style")
    parser.add_argument(
        "--optimize", action="store_true", default=None, help="Optimize with SVGO"
    )
    parser.add_argument(
        "--format", action="store_true", default=None, help="Format with Prettier"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate input files exist
    if not args.svg_file.exists():
        print(f"Error: SVG file not found: {args.svg_file}", file=sys.stderr)
        return 1

    if args.config is not None and not args.config.exists():
        print(f"Error: Options file not found: {args.config}", file=sys.stderr)
        return 1

    # Parse options
    try:
        options = (
            parse_options_file(args.config) if args.config else ConversionOptions()
        )
        options = dataclasses.replace(options, **collect_overrides(args))
    except Exception as e:
        print(f"Error: Failed to parse options: {e}", file=sys.stderr)
        return 2

    component_name = args.name or component_name_from_path(args.svg_file)

    # Convert
    try:
        result = convert_svg_file(args.svg_file, component_name, options)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Failed to read SVG: {e}", file=sys.stderr)
        return 1

    if result.has_errors or result.warnings:
        print(format_conversion_report(result), file=sys.stderr)
    if result.has_errors:
        return 3

    # Handle output
    if args.output is None:
        print(result.source)
        return 0

    output_path = args.output
    if output_path.is_dir():
        output_path = output_path / output_filename(component_name, options.typescript)
    try:
        output_path.write_text(result.source, encoding="utf-8")
    except OSError as e:
        print(f"Error: Failed to write output: {e}", file=sys.stderr)
        return 1
    print(f"Output written to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
