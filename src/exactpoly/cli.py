"""Command-line entry point.

    exactpoly [INPUT] [--k K] [--format text|json] [--verbose]

Reads the JSON input document (stdin when INPUT is omitted or '-'),
interpolates, verifies against every point and prints the report.
Exit status: 0 all points match, 1 mismatches found, 2 error.
"""

import argparse
import logging
import sys

from exactpoly import render
from exactpoly.errors import InterpolationError
from exactpoly.interpolate import interpolate
from exactpoly.loader import RunConfig, load
from exactpoly.verify import verify

logger = logging.getLogger(__name__)


def solve(config: RunConfig, points: list) -> tuple:
    """Interpolate through k points, then verify against all of them."""
    poly = interpolate(points, config.k)
    report = verify(poly, points)
    return poly, report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='exactpoly',
        description="Exact polynomial reconstruction from base-encoded points")
    parser.add_argument('input', nargs='?', default='-',
                        help="input JSON document (default: stdin)")
    parser.add_argument('--k', type=int, default=None,
                        help="override keys.k from the document")
    parser.add_argument('--format', choices=['text', 'json'], default='text')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')

    try:
        if args.input == '-':
            # binary stream so decoding errors surface as InputFormatError
            config, points = load(getattr(sys.stdin, 'buffer', sys.stdin))
        else:
            with open(args.input, 'rb') as f:
                config, points = load(f)
        if args.k is not None:
            config = RunConfig(n=config.n, k=args.k)
        poly, report = solve(config, points)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except InterpolationError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 2

    if args.format == 'json':
        sys.stdout.write(render.to_json(poly, report) + '\n')
    else:
        sys.stdout.write(render.to_text(poly, report))
    return 0 if report.all_matched else 1


if __name__ == '__main__':
    sys.exit(main())
