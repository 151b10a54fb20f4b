import json
from operator import attrgetter


class Serializable:

    @classmethod
    def from_json(cls, obj):
        return cls(**obj)


    def to_json(self, out, **kwargs):
        return json.dump(self, out, default=attrgetter('__dict__'), **kwargs)


def print_tree(obj, indent=2):
    if type(obj) in (bool, str, int, float, complex):
        print(F'({type(obj).__name__}) {obj}')
    elif obj is None:
        print('None')
    elif isinstance(obj, (list, tuple)):
        print(F'{type(obj).__name__}:')
        for k in obj:
            print(' '*indent, end='')
            print_tree(k, indent=indent+2)
    else:
        if type(obj) is dict:
            d = obj
        else:
            d = obj.__dict__
        print(F'{type(obj).__name__}:')
        for k, v in d.items():
            print(' '*indent, end='')
            print(F'{k} = ', end='')
            print_tree(v, indent=indent+2)
