#!/usr/bin/env python3
"""
CLI entry point for the character analysis pipeline.
Accepts raw model output (or source text to send to the model) via argument, file, or stdin.
"""

import argparse
import json
import logging
import sys

import config
from core import analyze_text, run_analysis_pipeline
from models import PipelineError, RequestedLocale
from utils import JSONAssembler


def read_file(path: str, label: str) -> str:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        print(f"Error: {label} file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error reading {label} file: {e}", file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recover a validated character analysis from language model output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Recover a reply saved from the model
  python run.py --raw-file reply.txt

  # From argument
  python run.py --raw '{"characters": [], "interactions": []}'

  # Ask the model first (needs the 'local' extra), Arabic results
  python run.py --text-file chapter.txt --locale ar

  # From stdin
  cat reply.txt | python run.py

  # Specify output file
  python run.py --raw-file reply.txt --output analysis.json
        """
    )

    # Input options
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--raw', type=str, help='Raw model output as a string')
    source.add_argument('--raw-file', type=str, help='Path to file containing raw model output')
    source.add_argument('--text', type=str, help='Source text to send to the model')
    source.add_argument('--text-file', type=str, help='Path to file containing source text to send to the model')

    parser.add_argument(
        '--locale',
        type=str,
        default=config.DEFAULT_LOCALE,
        choices=[locale.value for locale in RequestedLocale],
        help=f'Requested result language (default: {config.DEFAULT_LOCALE})'
    )

    # Output options
    parser.add_argument('--output', type=str, default=None, help='Output JSON file path (default: stdout)')
    parser.add_argument('--verbose', action='store_true', help='Log every pipeline stage')
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    locale = RequestedLocale.from_tag(args.locale)

    ask_model = args.text is not None or args.text_file is not None
    if args.text is not None:
        input_text = args.text
    elif args.text_file is not None:
        input_text = read_file(args.text_file, "Text")
    elif args.raw is not None:
        input_text = args.raw
    elif args.raw_file is not None:
        input_text = read_file(args.raw_file, "Raw output")
    elif not sys.stdin.isatty():
        # From stdin (pipe)
        input_text = sys.stdin.read()
    else:
        parser.print_help()
        print("\nError: No input provided. Use --raw, --raw-file, --text, --text-file, or pipe via stdin.",
              file=sys.stderr)
        sys.exit(1)

    try:
        if ask_model:
            result = analyze_text(input_text, locale)
        else:
            result = run_analysis_pipeline(input_text, locale)
    except PipelineError as e:
        payload, status = JSONAssembler.error_payload(e, locale)
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        print(f"✗ {e} (status {status})", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        sys.exit(130)

    output = json.dumps(JSONAssembler.assemble(result), indent=2, ensure_ascii=False)
    output_file = args.output or config.OUTPUT_FILE
    if output_file:
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(output)
        print(f"✓ Wrote output to {output_file}")
        print(f"  - {len(result.characters)} characters")
        print(f"  - {len(result.interactions)} interactions")
    else:
        print(output)
    sys.exit(0)


if __name__ == "__main__":
    main()
