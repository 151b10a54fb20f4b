from kdindex.util.geometry import Point, Rect
from .serializable import Serializable


class QueryResult(Serializable):
    '''
    Outcome of one query against an index.

    `kind` is 'range' (query is a `Rect`, points all points inside it) or
    'nearest' (query is a `Point`, points holds the neighbor, or nothing if
    the index was empty).
    '''
    def __init__(self, kind, query, points, agrees=None):
        self.kind = kind
        self.query = query
        self.points = points
        self.agrees = agrees


    @classmethod
    def from_json(cls, obj):
        if obj['kind'] == 'range':
            query = Rect(*obj['query'])
        else:
            query = Point(*obj['query'])
        points = [ Point(*p) for p in obj['points'] ]

        return cls(obj['kind'], query, points, obj.get('agrees'))


class QueryReport(Serializable):
    def __init__(self, source, size, height, results):
        self.source = source
        self.size = size
        self.height = height
        self.results = results


    @classmethod
    def from_json(cls, obj):
        results = [ QueryResult.from_json(r) for r in obj['results'] ]
        return cls(obj['source'], obj['size'], obj['height'], results)
