try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install adjnet[networkx]"
    ) from e

from ..core.errors import ValidationError
from ..core.graph import Graph
from ..io.codec import to_edge_view


def to_nx(graph: Graph) -> "nx.MultiDiGraph":
    """
    Export Graph to a NetworkX MultiDiGraph.

    Parameters
    ----------
    graph : Graph
        Source graph instance.

    Returns
    -------
    networkx.MultiDiGraph
        Nodes ``0..n-1``; one edge per occurrence, keyed by its occurrence
        index so parallel edges and self-loops survive.
    """
    G = nx.MultiDiGraph()
    G.add_nodes_from(range(graph.n))
    for e in to_edge_view(graph).edges:
        G.add_edge(e.source, e.target, key=e.index)
    return G


def from_nx(nxG) -> Graph:
    """
    Import a NetworkX graph whose nodes are exactly ``0..n-1``.

    Undirected graphs contribute both directions of every edge; multigraphs
    keep their parallel edges. Attributes are dropped.
    """
    n = nxG.number_of_nodes()
    if set(nxG.nodes) != set(range(n)):
        raise ValidationError("NetworkX graph nodes must be the integers 0..n-1")

    pairs = []
    for u, v in nxG.edges():
        pairs.append((u, v))
        if not nxG.is_directed() and u != v:
            pairs.append((v, u))
    return Graph.from_edges(n, pairs)
