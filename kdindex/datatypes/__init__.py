from .result import QueryResult as _QueryResult, \
        QueryReport as _QueryReport
from .serializable import Serializable, print_tree


# export namespace
QueryResult = _QueryResult
QueryReport = _QueryReport
