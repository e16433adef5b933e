from enum import Enum

__all__ = ["Representation", "EntryDomain", "GraphType", "SpecialType", "SetOperation"]


class Representation(str, Enum):
    """Textual encoding of a graph (LIST, MATRIX).

    Attributes:
        LIST: Adjacency list, one array of neighbour ids per node
        MATRIX: Square adjacency matrix of edge multiplicities
    """

    LIST = "list"
    MATRIX = "matrix"


class EntryDomain(str, Enum):
    """Allowed values for adjacency matrix entries."""

    ANY_NON_NEGATIVE = "any_non_negative"
    ZERO_OR_ONE = "zero_or_one"


class GraphType(str, Enum):
    SIMPLE = "Simple"
    MULTI = "Multi"


class SpecialType(str, Enum):
    """Special structure tag reported by the classifier.

    Only one tag is reported per graph; see
    ``adjnet.algorithms.classify.SPECIAL_TYPE_CHECKS`` for the priority.
    """

    TREE = "Tree"
    BIPARTITE = "Bipartite"
    COMPLETE = "Complete"
    NONE = "-"


class SetOperation(str, Enum):
    UNION = "union"
    INTERSECTION = "intersection"
    COMPLEMENT = "complement"
    CARTESIAN_PRODUCT = "cartesian_product"

    @property
    def arity(self) -> int:
        return 1 if self is SetOperation.COMPLEMENT else 2
