"""
Hilbert curve command-line tool.

Main entry point for conversions, lookup tables, analysis and plots.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from hilbert_curve.config import CurveConfig
from hilbert_curve.core import distance_to_point, point_to_distance
from hilbert_curve.mapper import HilbertMapper
from hilbert_curve.analysis import analyze_locality
from hilbert_curve.storage import JSONStorage, build_table, save_table
from hilbert_curve.exceptions import HilbertError


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def cmd_d2xy(args, config: CurveConfig) -> int:
    x, y = distance_to_point(args.d, args.n, check_bounds=config.check_bounds)
    print(f"{x} {y}")
    return 0


def cmd_xy2d(args, config: CurveConfig) -> int:
    check_bounds = args.check_bounds or config.check_bounds
    d = point_to_distance(args.x, args.y, args.n, check_bounds=check_bounds)
    print(d)
    return 0


def cmd_table(args, config: CurveConfig) -> int:
    order = config.order if args.order is None else args.order
    mapper = HilbertMapper(order=order, cache=False, use_compiled=config.use_compiled)

    compress = args.compress or config.storage.compress

    if args.store:
        storage = JSONStorage(config.storage.base_path)
        path = storage.save(build_table(order), f"order{order}", compress=compress)
        logger.info(f"Table saved to: {path}")
        return 0

    if args.output is None:
        for d, (x, y) in enumerate(mapper.map_all()):
            print(f"{d} {x} {y}")
        return 0

    path = save_table(mapper, Path(args.output), compress=compress)
    logger.info(f"Table saved to: {path}")
    return 0


def cmd_analyze(args, config: CurveConfig) -> int:
    order = config.order if args.order is None else args.order
    n = HilbertMapper(order=order, cache=False).size
    logger.info(f"Analyzing locality for order {order}")

    report = analyze_locality(n, window=args.window)

    logger.info(f"Continuous: {report.continuous}, score={report.locality_score:.4f}")
    print(json.dumps(report.to_dict(), indent=2, allow_nan=False))
    return 0


def cmd_plot(args, config: CurveConfig) -> int:
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    from hilbert_curve.visualization import plot_curve

    order = config.order if args.order is None else args.order
    params = config.plot

    ax = plot_curve(
        order=order,
        color=params.color,
        linewidth=params.linewidth,
        show_points=params.show_points,
        annotate=params.annotate,
    )

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    ax.figure.savefig(output, dpi=params.dpi)
    plt.close(ax.figure)

    logger.info(f"Plot saved to: {output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hilbert-curve",
        description="Hilbert curve mapping between distance and 2D grid cells",
    )
    parser.add_argument('--config', type=str, default=None,
                        help='JSON config file (default: built-in defaults)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('d2xy', help='Convert distance to (x, y)')
    p.add_argument('d', type=int, help='Distance along the curve')
    p.add_argument('n', type=int, help='Grid side (power of 2)')
    p.set_defaults(func=cmd_d2xy)

    p = sub.add_parser('xy2d', help='Convert (x, y) to distance')
    p.add_argument('x', type=int)
    p.add_argument('y', type=int)
    p.add_argument('n', type=int, help='Grid side (power of 2)')
    p.add_argument('--check-bounds', action='store_true',
                   help='Reject coordinates outside the grid')
    p.set_defaults(func=cmd_xy2d)

    p = sub.add_parser('table', help='Write the lookup table for an order')
    p.add_argument('order', type=int, nargs='?', default=None,
                   help='Curve order (default: from config)')
    p.add_argument('--output', type=str, default=None,
                   help='Output file (default: print "d x y" lines)')
    p.add_argument('--compress', action='store_true',
                   help='Gzip the output file')
    p.add_argument('--store', action='store_true',
                   help='Save as order<N> in the configured storage directory')
    p.set_defaults(func=cmd_table)

    p = sub.add_parser('analyze', help='Report locality measures')
    p.add_argument('order', type=int, nargs='?', default=None,
                   help='Curve order (default: from config)')
    p.add_argument('--window', type=int, default=16,
                   help='Run length for spread measure (default: 16)')
    p.set_defaults(func=cmd_analyze)

    p = sub.add_parser('plot', help='Plot the curve to an image file')
    p.add_argument('order', type=int, nargs='?', default=None,
                   help='Curve order (default: from config)')
    p.add_argument('--output', type=str, required=True,
                   help='Image file to write')
    p.set_defaults(func=cmd_plot)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = CurveConfig.load(args.config) if args.config else CurveConfig()
        config.validate_or_raise()
        for issue in config.validate():
            logger.warning(issue)
        return args.func(args, config)
    except (HilbertError, ValueError) as e:
        logger.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
