"""Command-line interface for JustStrokes.

Subcommands:
    serve    Run the line-protocol socket service.
    web      Run the Flask JSON endpoint.
    convert  Convert a JSON database to the CSV layout.
    check    Verify every database entry matches itself first.
    bench    Time full self-identity passes over a database.

Usage:
    python -m juststrokes serve -d graphics.csv
    python -m juststrokes serve -d graphics.json --tcp 127.0.0.1:7070
    python -m juststrokes web -d graphics.csv --port 5000
    python -m juststrokes convert graphics.json graphics.csv
    python -m juststrokes check -d graphics.csv -k 5
    python -m juststrokes bench -d graphics.csv --runs 3
"""

from __future__ import annotations

import argparse
import logging

from . import __version__
from .config import (
    DEFAULT_CANDIDATES,
    DEFAULT_DATA_FILE,
    DEFAULT_MAX_RATIO,
    DEFAULT_MIN_WIDTH,
    DEFAULT_WEB_HOST,
    DEFAULT_WEB_PORT,
    MatcherOptions,
    configure_logging,
)
from .data.loaders import json_to_csv, load_database
from .matching.evaluation import benchmark, check_self_identity
from .matching.matcher import Matcher

logger = logging.getLogger(__name__)


def _parse_tcp_address(value: str) -> tuple[str, int]:
    host, sep, port = value.rpartition(':')
    if not sep or not port.isdigit():
        raise argparse.ArgumentTypeError(f"expected HOST:PORT, got {value!r}")
    return (host or '127.0.0.1', int(port))


def _add_database_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--data-file', '-d', type=str, default=DEFAULT_DATA_FILE,
                        help=f'Character database, JSON or CSV (default: {DEFAULT_DATA_FILE})')
    parser.add_argument('--max-ratio', type=float, default=DEFAULT_MAX_RATIO,
                        help=f'Max bounding box aspect ratio (default: {DEFAULT_MAX_RATIO})')
    parser.add_argument('--min-width', type=float, default=DEFAULT_MIN_WIDTH,
                        help=f'Min bounding box extent (default: {DEFAULT_MIN_WIDTH})')


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='juststrokes',
        description='Chinese character handwriting recognition'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--log-level', type=str, default='INFO',
                        help='Log level (default: INFO)')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write logs to this file')
    sub = parser.add_subparsers(dest='command', required=True)

    serve = sub.add_parser('serve', help='Run the socket service')
    _add_database_arguments(serve)
    where = serve.add_mutually_exclusive_group()
    where.add_argument('--socket-path', '-s', type=str, default=None,
                       help='Unix socket path (default: /run/user/<uid>/handwritten/juststrokes.socket)')
    where.add_argument('--tcp', type=_parse_tcp_address, default=None, metavar='HOST:PORT',
                       help='Listen on TCP instead of a Unix socket')
    serve.add_argument('--candidates', '-k', type=int, default=DEFAULT_CANDIDATES,
                       help=f'Candidates per request (default: {DEFAULT_CANDIDATES})')

    web = sub.add_parser('web', help='Run the Flask JSON endpoint')
    _add_database_arguments(web)
    web.add_argument('--host', type=str, default=DEFAULT_WEB_HOST,
                     help=f'Bind host (default: {DEFAULT_WEB_HOST})')
    web.add_argument('--port', type=int, default=DEFAULT_WEB_PORT,
                     help=f'Bind port (default: {DEFAULT_WEB_PORT})')
    web.add_argument('--candidates', '-k', type=int, default=DEFAULT_CANDIDATES,
                     help=f'Default candidates per request (default: {DEFAULT_CANDIDATES})')

    convert = sub.add_parser('convert', help='Convert a JSON database to CSV')
    convert.add_argument('json_path', help='Input graphics.json')
    convert.add_argument('csv_path', help='Output graphics.csv')

    check = sub.add_parser('check', help='Check every entry matches itself')
    _add_database_arguments(check)
    check.add_argument('--candidates', '-k', type=int, default=5,
                       help='Candidates per query (default: 5)')
    check.add_argument('--show', type=int, default=10,
                       help='Failures to print (default: 10)')

    bench = sub.add_parser('bench', help='Benchmark self-identity passes')
    _add_database_arguments(bench)
    bench.add_argument('--runs', type=int, default=3,
                       help='Number of passes (default: 3)')
    bench.add_argument('--candidates', '-k', type=int, default=5,
                       help='Candidates per query (default: 5)')
    return parser


def _build_matcher(args) -> Matcher:
    print(f"Loading character database from {args.data_file}...")
    entries = load_database(args.data_file)
    print(f"Loaded {len(entries)} characters")
    return Matcher(entries, MatcherOptions(max_ratio=args.max_ratio, min_width=args.min_width))


def _serve_command(args) -> int:
    from .api.socket_service import SocketService

    matcher = _build_matcher(args)
    service = SocketService(matcher, socket_path=args.socket_path, address=args.tcp,
                            candidates=args.candidates)
    print(f"Starting socket service at {service.server_address}")
    try:
        service.serve_forever()
    except KeyboardInterrupt:
        print("Interrupted")
    finally:
        service.close()
    return 0


def _web_command(args) -> int:
    from .api.web import create_app

    app = create_app(_build_matcher(args), candidates=args.candidates)
    app.run(host=args.host, port=args.port)
    return 0


def _convert_command(args) -> int:
    count = json_to_csv(args.json_path, args.csv_path)
    print(f"Wrote {count} characters to {args.csv_path}")
    return 0


def _check_command(args) -> int:
    matcher = _build_matcher(args)

    counts = matcher.stroke_counts()
    print("Stroke count distribution:")
    for count in list(counts)[:10]:
        print(f"  {count} strokes: {counts[count]} characters")

    report = check_self_identity(matcher, how_many=args.candidates)
    print(f"\nTested: {report.tested}")
    print(f"Passed: {report.passed}")
    print(f"Failed: {report.failed}")
    print(f"Success rate: {report.success_rate:.2%}")
    if report.failures:
        print(f"\nFirst {min(args.show, len(report.failures))} failures:")
        for expected, candidates in report.failures[:args.show]:
            print(f"  Expected: {expected!r}, Got: {candidates}")
    return 0 if report.failed == 0 else 1


def _bench_command(args) -> int:
    matcher = _build_matcher(args)
    result = benchmark(matcher, runs=args.runs, how_many=args.candidates)
    print("=== Summary ===")
    print(f"Characters: {result.entries}")
    print(f"Runs: {len(result.durations)}")
    print(f"Average: {result.average_ms:.2f} ms")
    print(f"Min: {result.min_ms:.2f} ms")
    print(f"Max: {result.max_ms:.2f} ms")
    print(f"Throughput: {result.throughput:.2f} chars/sec")
    return 0


_COMMANDS = {
    'serve': _serve_command,
    'web': _web_command,
    'convert': _convert_command,
    'check': _check_command,
    'bench': _bench_command,
}


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the chosen subcommand.

    Returns:
        Process exit status.
    """
    args = _create_argument_parser().parse_args(argv)
    configure_logging(level=args.log_level, log_file=args.log_file)
    try:
        return _COMMANDS[args.command](args)
    except FileNotFoundError as e:
        logger.error("File not found: %s", e.filename)
        return 2
    except ValueError as e:
        logger.error("%s", e)
        return 2
