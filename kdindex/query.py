#!/usr/bin/env python3

import sys
import io
import argparse
import logging

import brotli

from kdindex.datatypes import QueryResult, QueryReport
from kdindex.util.geometry import Point, Rect
from kdindex.util.kdtree import KdTree
from kdindex.util.pointset import PointSet


def load_points(f):
    '''
    Read whitespace separated `x y` pairs, one per line. Blank lines and
    lines starting with `#` are skipped. Returns None if any line is
    malformed.
    '''
    logging.info('Loading points from %s', f.name)

    points = []
    bad = 0
    for lineno, line in enumerate(f, start=1):
        line = line.strip()
        if len(line) == 0 or line.startswith('#'):
            continue

        fields = line.split()
        try:
            if len(fields) != 2:
                raise ValueError(F'expected 2 fields, got {len(fields)}')
            p = Point(float(fields[0]), float(fields[1]))
            if not (0.0 <= p.x <= 1.0 and 0.0 <= p.y <= 1.0):
                raise ValueError('outside the unit square')
        except ValueError as err:
            logging.error('  Line %d (%s): %s', lineno, line, err)
            bad += 1
            continue

        points.append(p)

    if bad > 0:
        logging.error('  %d invalid lines in %s', bad, f.name)
        return None

    logging.info('  Loaded %d points.', len(points))
    return points


def build_index(points, cls=KdTree):
    index = cls.from_points(points)
    logging.info('  %s: %d distinct points', cls.__name__, index.size())
    return index


def run_queries(tree, ranges, nearests, reference=None):
    results = []

    for rect in ranges:
        found = tree.range(rect)
        logging.info('Range %s: %d points', rect, len(found))
        agrees = None
        if reference is not None:
            agrees = set(found) == set(reference.range(rect)) and len(set(found)) == len(found)
            _log_agreement(agrees, 'Range', rect)
        results.append(QueryResult('range', rect, found, agrees))

    for p in nearests:
        nearest = tree.nearest(p)
        logging.info('Nearest to %s: %s', p, nearest)
        agrees = None
        if reference is not None:
            expected = reference.nearest(p)
            if nearest is None or expected is None:
                agrees = nearest is expected
            else:
                agrees = p.distance_squared_to(nearest) == p.distance_squared_to(expected)
            _log_agreement(agrees, 'Nearest', p)
        results.append(QueryResult('nearest', p, [] if nearest is None else [nearest], agrees))

    return results


def _log_agreement(agrees, kind, query):
    if agrees:
        logging.debug('  %s %s agrees with brute force', kind, query)
    else:
        logging.error('  %s %s does not agree with brute force', kind, query)


def write_report(report, filename):
    logging.info('Writing results to %s', filename)
    stringio = io.StringIO()
    report.to_json(stringio, indent=2)
    json_data = stringio.getvalue().encode('utf-8')

    if filename.endswith('.br'):
        sz1 = len(json_data)
        json_data = brotli.compress(json_data, brotli.MODE_TEXT)
        logging.info('  Compressed %d to %d bytes', sz1, len(json_data))

    with open(filename, 'wb') as out:
        out.write(json_data)


def _rect(values):
    try:
        return Rect(*values)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err))


def main(argv):
    parser = argparse.ArgumentParser(description='Build a 2d-tree from a point file and query it.')
    parser.add_argument('input', metavar='<points.txt>', help='File with one "x y" pair per line', type=argparse.FileType('r'))
    parser.add_argument('--range', metavar=('XMIN', 'YMIN', 'XMAX', 'YMAX'), nargs=4, type=float, action='append',
            default=[], help='Report all points inside this rectangle (repeatable)')
    parser.add_argument('--nearest', metavar=('X', 'Y'), nargs=2, type=float, action='append',
            default=[], help='Report the point nearest to this one (repeatable)')
    parser.add_argument('--brute-force', action='store_true', help='Check all results against a linear scan')
    parser.add_argument('--plot', action='store_true', help='Show the partition with matplotlib')
    parser.add_argument('--out', metavar='<output file>', help='Write results as .json or .json.br')
    parser.add_argument('-v', '--verbose', action='store_true')

    parsed = parser.parse_args(argv)
    if parsed.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        ranges = [ _rect(r) for r in parsed.range ]
    except argparse.ArgumentTypeError as err:
        parser.error(F'--range: {err}')
    nearests = [ Point(*p) for p in parsed.nearest ]

    points = load_points(parsed.input)
    parsed.input.close()
    if points is None:
        return 1

    tree = build_index(points)
    logging.info('  Tree height %d', tree.height())

    reference = build_index(points, PointSet) if parsed.brute_force else None
    results = run_queries(tree, ranges, nearests, reference)

    if parsed.out is not None:
        write_report(QueryReport(parsed.input.name, tree.size(), tree.height(), results), parsed.out)

    if parsed.plot:
        from kdindex.util.plot_kdtree import plot_kdtree
        plot_kdtree(tree,
                query_rect=ranges[-1] if len(ranges) > 0 else None,
                query_point=nearests[-1] if len(nearests) > 0 else None)

    if any(r.agrees is False for r in results):
        return 1

    logging.info('Done')
    return 0


def cli():
    logging.basicConfig(format='%(asctime)s %(levelname)8s  %(message)s',
            level=logging.INFO,
            datefmt='%H:%M:%S')

    sys.exit(main(sys.argv[1:]))


if __name__ == '__main__':
    cli()
