"""Graph input helpers.

`edges` validates edge triples and builds the solver's adjacency; `convert`
adapts NetworkX graphs to that edge-list form.
"""

from flexalgo.graph.convert import NodeMap, from_networkx
from flexalgo.graph.edges import Adjacency, Edge, build_adjacency, check_node

__all__ = [
    "Adjacency",
    "Edge",
    "NodeMap",
    "build_adjacency",
    "check_node",
    "from_networkx",
]
