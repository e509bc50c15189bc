#!/usr/bin/env python3
"""Command-line interface for the justification engine.

Usage:
    justify-text notes.txt --width 40
    justify-text notes.txt --width 40 --output notes.justified.txt
    cat notes.txt | justify-text --width 72
    justify-text notes.txt --config ./justify.yaml --verbose
"""

import argparse
import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from config import ConfigError, get_config_value, load_config, merge_config
from justify.engine import transform
from justify.errors import JustifyError


logger = logging.getLogger(__name__)

STDIN_MARKER = '-'


def setup_argparser() -> argparse.ArgumentParser:
    """Set up the argument parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog='justify-text',
        description='Re-flow text into fully justified lines of a fixed width.',
        epilog='Example: justify-text notes.txt --width 40',
    )

    parser.add_argument(
        'input',
        nargs='?',
        default=STDIN_MARKER,
        help='Input file (default: read from stdin)',
    )

    parser.add_argument(
        '--width', '-w',
        type=int,
        help='Line width in characters (default: justify.line_width from config)',
    )

    parser.add_argument(
        '--output', '-o',
        help='Output file path (default: write to stdout)',
    )

    parser.add_argument(
        '--config', '-c',
        help='YAML config file layered over the bundled defaults',
    )

    parser.add_argument(
        '--encoding', '-e',
        help=('Encoding for the input (file or stdin) and the --output file; '
              'stdout uses the locale encoding (default: justify.encoding from config)'),
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output',
    )

    return parser


def build_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the bundled defaults and layer a user config file over them.

    Args:
        config_path: Path to a user config file, or None.

    Returns:
        Merged configuration dictionary.

    Raises:
        FileNotFoundError: If config_path does not exist.
        ConfigError: If a config file is invalid.
    """
    config = load_config()
    if config_path:
        config = merge_config(config, load_config(config_path))
    return config


def setup_logging(logging_config: Dict[str, Any], verbose: bool = False) -> None:
    """Set up logging configuration.

    Args:
        logging_config: Logging configuration dictionary.
        verbose: Force DEBUG level.
    """
    log_level = 'DEBUG' if verbose else str(logging_config.get('level', 'WARNING'))
    log_format = logging_config.get(
        'format',
        '%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
    date_format = logging_config.get('date_format', '%Y-%m-%d %H:%M:%S')
    formatter = logging.Formatter(log_format, date_format)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries the justified text, so log to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = logging_config.get('file')
    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=logging_config.get('max_bytes', 10485760),
            backupCount=logging_config.get('backup_count', 5),
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def read_input(source: str, encoding: str) -> str:
    """Read the text to justify.

    Args:
        source: File path, or '-' for stdin.
        encoding: Encoding used to decode the file or stdin bytes.

    Returns:
        Input text.
    """
    if source == STDIN_MARKER:
        logger.debug("Reading input from stdin")
        return sys.stdin.buffer.read().decode(encoding)

    logger.debug(f"Reading input from {source}")
    with open(source, 'r', encoding=encoding) as f:
        return f.read()


def write_output(text: str, destination: Optional[str], encoding: str) -> None:
    """Write justified text, followed by a newline if it is not empty.

    Args:
        text: Justified text.
        destination: Output file path, or None for stdout.
        encoding: File encoding.
    """
    payload = text + '\n' if text else text

    if destination is None:
        sys.stdout.write(payload)
        return

    output_path = Path(destination)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding=encoding) as f:
        f.write(payload)
    logger.info(f"Justified text written to: {output_path}")


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = setup_argparser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args.config)
    except (FileNotFoundError, ConfigError) as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.get('logging', {}), verbose=args.verbose)

    width = args.width
    if width is None:
        width = get_config_value(config, 'justify.line_width', 80)
    encoding = args.encoding or get_config_value(config, 'justify.encoding', 'utf-8')
    logger.debug(f"Line width: {width}, encoding: {encoding}")

    try:
        text = read_input(args.input, encoding)
        result = transform(text, width)
        write_output(result, args.output, encoding)
        return 0

    except JustifyError as e:
        print(f"Justify error: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeError, LookupError) as e:
        print(f"I/O error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
