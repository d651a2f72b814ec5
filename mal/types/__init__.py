from mal.types.symbol import Symbol, Keyword
from mal.types.nil import Nil, Undefined
from mal.types.sequence import Sequence, List, Vector
from mal.types.hash_map import HashMap
from mal.types.atom import Atom
from mal.types.environment import Environment
from mal.types.lambda_fn import Closure
from mal.types.native_fn import NativeFunction
from mal.types.value import Kind, kind_of, is_sequential, is_callable, is_truthy, equal

__all__ = (
    "Symbol",
    "Keyword",
    "Nil",
    "Undefined",
    "Sequence",
    "List",
    "Vector",
    "HashMap",
    "Atom",
    "Environment",
    "Closure",
    "NativeFunction",
    "Kind",
    "kind_of",
    "is_sequential",
    "is_callable",
    "is_truthy",
    "equal",
)
