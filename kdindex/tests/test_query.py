import io
import json

import brotli

from kdindex.datatypes import QueryReport, QueryResult, print_tree
from kdindex.query import load_points, build_index, run_queries, main
from kdindex.util.geometry import Point, Rect
from kdindex.util.kdtree import KdTree
from kdindex.util.pointset import PointSet


POINTS = '''\
# sample input
0.7 0.2
0.5 0.4
0.2 0.3

0.4 0.7
0.9 0.6
0.7 0.2
'''


def named(text, name='points.txt'):
    f = io.StringIO(text)
    f.name = name
    return f


def test_load_points():
    points = load_points(named(POINTS))
    assert len(points) == 6
    assert points[0] == Point(0.7, 0.2)
    assert build_index(points).size() == 5


def test_load_points_rejects_bad_lines():
    assert load_points(named('0.1 0.2\n0.3\n')) is None
    assert load_points(named('0.1 zero\n')) is None
    assert load_points(named('1.1 0.5\n')) is None


def test_run_queries_with_reference():
    points = load_points(named(POINTS))
    tree = build_index(points)
    results = run_queries(tree,
            [Rect(0.0, 0.0, 0.5, 0.5)],
            [Point(0.45, 0.45)],
            build_index(points, PointSet))

    assert [ r.kind for r in results ] == ['range', 'nearest']
    assert set(results[0].points) == {Point(0.5, 0.4), Point(0.2, 0.3)}
    assert results[1].points == [Point(0.5, 0.4)]
    assert all(r.agrees for r in results)


def test_run_queries_empty_tree():
    results = run_queries(KdTree(), [Rect(0.0, 0.0, 1.0, 1.0)], [Point(0.5, 0.5)], PointSet())
    assert results[0].points == []
    assert results[1].points == []
    assert all(r.agrees for r in results)


def test_report_round_trip():
    report = QueryReport('points.txt', 2, 2, [
        QueryResult('range', Rect(0.0, 0.0, 0.5, 0.5), [Point(0.2, 0.3)], True),
        QueryResult('nearest', Point(0.1, 0.1), [], None),
        ])

    out = io.StringIO()
    report.to_json(out)
    obj = json.loads(out.getvalue())
    assert obj['results'][0]['query'] == [0.0, 0.0, 0.5, 0.5]

    loaded = QueryReport.from_json(obj)
    assert loaded.size == 2
    assert loaded.results[0].query == Rect(0.0, 0.0, 0.5, 0.5)
    assert loaded.results[0].points == [Point(0.2, 0.3)]
    assert loaded.results[1].query == Point(0.1, 0.1)
    assert loaded.results[1].agrees is None


def test_main_writes_compressed_report(tmp_path):
    src = tmp_path / 'points.txt'
    src.write_text(POINTS)
    out = tmp_path / 'result.json.br'

    status = main([str(src),
            '--range', '0', '0', '0.5', '0.5',
            '--nearest', '0.45', '0.45',
            '--brute-force',
            '--out', str(out)])
    assert status == 0

    obj = json.loads(brotli.decompress(out.read_bytes()).decode('utf-8'))
    assert obj['size'] == 5
    assert obj['height'] == 3
    assert obj['results'][1]['points'] == [[0.5, 0.4]]


def test_main_invalid_input(tmp_path):
    src = tmp_path / 'points.txt'
    src.write_text('0.1 0.1\nnot a point\n')
    assert main([str(src)]) == 1


def test_print_tree(capsys):
    print_tree(QueryResult('nearest', Point(0.1, 0.1), [Point(0.2, 0.2)], True))
    out = capsys.readouterr().out
    assert out.startswith('QueryResult:')
    assert 'kind = (str) nearest' in out
    assert 'agrees = (bool) True' in out


def test_main_invalid_input_leaves_no_report(tmp_path):
    src = tmp_path / 'points.txt'
    src.write_text('0.1 0.1\n0.2\n')
    out = tmp_path / 'result.json'

    assert main([str(src), '--out', str(out)]) == 1
    assert not out.exists()
