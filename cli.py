#!/usr/bin/env python3
"""Warshall CLI - compute the transitive closure of a relation matrix."""
import argparse
import logging
import sys


def setup_logging(log_level: str):
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def cmd_run(args):
    """Read a relation from stdin and print it with its transitive closure."""
    from src.core import InvalidSize, Session
    from src.core.io import ConsoleLineSource, ConsoleTextSink

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    session = Session(
        ConsoleLineSource(show_prompts=not args.quiet),
        ConsoleTextSink(),
        max_size=args.max_size,
        interactive=not args.quiet
    )

    try:
        session.run()
    except InvalidSize as e:
        logger.error(f"Cannot build the relation matrix: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Session stopped by user")
        return 1

    return 0


def cmd_serve(args):
    """Start the closure HTTP API."""
    from src.app import app
    from src.config import Config

    setup_logging(args.log_level)

    host = args.host or '0.0.0.0'
    port = args.port or Config.PORT
    debug = args.debug if args.debug is not None else Config.DEBUG

    if args.max_size is not None:
        app.config['MAX_UNIVERSE_SIZE'] = args.max_size

    logger = logging.getLogger(__name__)
    logger.info(f"Starting closure API on {host}:{port}")

    app.run(debug=debug, host=host, port=port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    from src.config import Config

    parser = argparse.ArgumentParser(
        description='Warshall - transitive closure of a finite binary relation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Enter a relation row by row
  %(prog)s run

  # Pipe the rows in without prompts
  printf '1010\\n0100\\n0010\\n0001\\n' | %(prog)s run --quiet

  # Start the HTTP API
  %(prog)s serve --port 5001
"""
    )

    # Global options
    parser.add_argument(
        '--log-level',
        default=Config.LOG_LEVEL.upper(),
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Set the logging level (default: INFO)'
    )

    # Create subparsers for commands
    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        required=True
    )

    # Run command
    run_parser = subparsers.add_parser(
        'run',
        help='Compute a closure interactively',
        description='Read a relation matrix row by row and print its transitive closure'
    )
    run_parser.add_argument(
        '--max-size',
        type=int,
        default=Config.MAX_UNIVERSE_SIZE,
        help=f'Largest accepted universe size (default: {Config.MAX_UNIVERSE_SIZE})'
    )
    run_parser.add_argument(
        '--quiet',
        action='store_true',
        help='Do not print the introduction and row prompts'
    )
    run_parser.set_defaults(func=cmd_run)

    # Serve command
    serve_parser = subparsers.add_parser(
        'serve',
        help='Start the closure HTTP API',
        description='Start the closure HTTP API server'
    )
    serve_parser.add_argument(
        '--host',
        help='Host to bind to (default: 0.0.0.0)'
    )
    serve_parser.add_argument(
        '--port',
        type=int,
        help='Port to bind to (default: from config)'
    )
    serve_parser.add_argument(
        '--max-size',
        type=int,
        help='Largest accepted universe size (default: from config)'
    )
    serve_parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode'
    )
    serve_parser.add_argument(
        '--no-debug',
        dest='debug',
        action='store_false',
        help='Disable debug mode'
    )
    serve_parser.set_defaults(func=cmd_serve, debug=None)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()

    # Parse arguments
    args = parser.parse_args(argv)

    # Execute the command
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
