"""
Command-line interface for inspecting schema documents.

Example:
    schemagraph -f schema.json write -m Author
    dot -Kdot -Gdpi=300 -Tpng data.dot -odata.png
"""

import argparse
import sys
from typing import List, Optional

from .services.identity_index import ModelNotFoundError
from .services.schema_inspection import SchemaInspectionService
from .utils.config import config
from .utils.logging_config import get_logger, setup_logging
from .utils.output_writer import write_output
from .utils.schema_loader import SchemaLoadError

logger = get_logger(__name__)

EXIT_NOT_FOUND = 1
EXIT_BAD_INPUT = 2
EXIT_WRITE_FAILED = 3

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='schemagraph',
                                     description='Inspect models, fields and relations of a schema document')
    parser.add_argument('-f', '--file', required=True, help='Path of the schema JSON document')
    parser.add_argument('--log-level',
                        default=None,
                        type=str.upper,
                        choices=LOG_LEVELS,
                        help='Override LOG_LEVEL')

    subparsers = parser.add_subparsers(dest='command', required=True)

    enumerate_parser = subparsers.add_parser('enumerate', help='List models and their fields')
    enumerate_parser.add_argument('-u', '--uuid', action='store_true', help='Show UUIDs')
    enumerate_parser.add_argument('-m', '--model', default=None, help='Focus model name or UUID')

    write_parser = subparsers.add_parser('write', help='Write the entity-relationship graph as DOT')
    write_parser.add_argument('-m', '--model', default=None, help='Focus model name or UUID')
    write_parser.add_argument('-o',
                              '--output',
                              default=None,
                              help=f"Output path, '-' for stdout (default: {config.schema.dot_output})")

    get_parser = subparsers.add_parser('get', help='Show one model')
    get_parser.add_argument('-m', '--model', required=True, help='Model name or UUID')
    get_parser.add_argument('--show-meta', action='store_true', help='Include UUID and source location')

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command and return the process exit code."""
    try:
        service = SchemaInspectionService.from_file(args.file)
    except SchemaLoadError as e:
        logger.error(f'Failed to load schema: {e}')
        print(f'error: {e}', file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        if args.command == 'enumerate':
            text = service.enumerate(show_uuid=args.uuid, model=args.model)
            path = None
        elif args.command == 'write':
            text = service.render_dot(model=args.model)
            output = args.output or config.schema.dot_output
            path = None if output == '-' else output
        else:
            text = service.describe(args.model, show_meta=args.show_meta)
            path = None
    except ModelNotFoundError as e:
        print(f'error: {e}', file=sys.stderr)
        return EXIT_NOT_FOUND

    if not write_output(text, path):
        return EXIT_WRITE_FAILED
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        setup_logging(level=args.log_level)
    return run(args)


if __name__ == '__main__':
    sys.exit(main())
