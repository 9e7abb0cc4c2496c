#!/usr/bin/env python3
"""Token frequency counter CLI."""

import argparse
import sys
from collections import Counter
from pathlib import Path

import yaml

from .config import CountConfig
from .counter import FrequencyTable, count
from .options import CountOption
from .report import FrequencyReport, write_report
from .source import STDIN_PATH, InvalidEncodingError, open_source
from .url import is_url, open_url_source


def main() -> int:
    """Count tokens in the given inputs."""
    parser = argparse.ArgumentParser(
        description="Count character, word or line frequencies in UTF-8 text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s book.txt                       # Word frequencies
  %(prog)s book.txt --mode char           # Character frequencies
  %(prog)s access.log --mode line --top 10
  cat notes.txt | %(prog)s                # Read from stdin
  %(prog)s a.txt b.txt --json -o freq.json
  %(prog)s https://example.com/text.txt   # Count a remote file
  %(prog)s book.txt --config count.yml    # Load settings from YAML
        """,
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="INPUT",
        help=f"Files or http(s) URLs to read ('{STDIN_PATH}' or none for stdin)",
    )

    parser.add_argument(
        "-m",
        "--mode",
        choices=[o.value for o in CountOption],
        help="What to count (default: word)",
    )
    parser.add_argument("--top", type=int, metavar="N", help="Show only the N most frequent tokens")

    # Output
    parser.add_argument("--json", action="store_true", help="Write the report as JSON")
    parser.add_argument("-o", "--output", type=Path, help="Write the report to this file")

    # Settings
    parser.add_argument("--config", type=Path, help="Path to YAML settings file")
    parser.add_argument(
        "--timeout",
        type=int,
        metavar="SECONDS",
        help="Timeout for URL inputs (default: 30)",
    )

    args = parser.parse_args()

    config = _load_config(args.config)
    if config is None:
        return 1

    try:
        config.override(
            mode=args.mode,
            top=args.top,
            format="json" if args.json else None,
            output=args.output,
            timeout=args.timeout,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    table = _count_inputs(args.inputs or [STDIN_PATH], config)
    if table is None:
        return 1

    report = FrequencyReport.from_table(table, config.mode, top=config.top)

    if config.output is not None:
        try:
            write_report(report, config.output, config.format)
        except OSError as e:
            print(f"Error: Cannot write report: {e}", file=sys.stderr)
            return 1
        print(
            f"Counted {report.unique} unique tokens from {report.total} total -> {config.output}"
        )
    else:
        try:
            sys.stdout.write(report.render(config.format))
        except UnicodeEncodeError as e:
            print(
                f"Error: Cannot print tokens in {e.encoding} (use -o or set PYTHONIOENCODING=utf-8)",
                file=sys.stderr,
            )
            return 1

    return 0


def _load_config(path: Path | None) -> CountConfig | None:
    """Load settings from YAML, or defaults when no path is given.

    Args:
        path: Optional path to the YAML settings file.

    Returns:
        Loaded config, or None after printing an error.
    """
    if path is None:
        return CountConfig()

    if not path.exists():
        print(f"Error: Config file not found: {path}", file=sys.stderr)
        return None

    try:
        return CountConfig.from_yaml(path)
    except (KeyError, ValueError, yaml.YAMLError) as e:
        print(f"Error: Invalid config {path}: {e}", file=sys.stderr)
        return None


def _count_inputs(inputs: list[str], config: CountConfig) -> FrequencyTable | None:
    """Count every input and sum the results.

    Args:
        inputs: File paths, URLs or '-' for stdin.
        config: Run settings.

    Returns:
        Combined frequency table, or None after printing an error.
    """
    table: FrequencyTable = Counter()

    for name in inputs:
        try:
            if is_url(name):
                table.update(count(open_url_source(name, timeout=config.timeout), config.mode))
                continue

            if name != STDIN_PATH and not Path(name).is_file():
                print(f"Error: Input file not found: {name}", file=sys.stderr)
                return None

            with open_source(name) as f:
                table.update(count(f, config.mode))
        except InvalidEncodingError as e:
            print(f"Error: {name}: {e}", file=sys.stderr)
            return None
        except (RuntimeError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return None

    return table


if __name__ == "__main__":
    sys.exit(main())
