"""Product records and the undirected graph that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Product:
    """A catalogue entry."""

    id: int
    name: str
    category: str
    price: float
    popularity: int


class ProductGraph:
    """An undirected graph whose nodes are products, addressed by insertion index."""

    def __init__(self) -> None:
        self._nodes: list[Product] = []
        self._adjacency: list[list[int]] = []
        self._edges: list[tuple[int, int]] = []

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._nodes):
            raise IndexError(f"node index {index} out of range")

    def add_node(self, product: Product) -> int:
        """Add a product and return its node index."""
        self._nodes.append(product)
        self._adjacency.append([])
        return len(self._nodes) - 1

    def add_edge(self, a: int, b: int) -> int:
        """Connect two nodes and return the edge index."""
        self._check(a)
        self._check(b)
        self._edges.append((a, b))
        self._adjacency[a].append(b)
        if a != b:
            self._adjacency[b].append(a)
        return len(self._edges) - 1

    def contains_edge(self, a: int, b: int) -> bool:
        """Whether an edge joins the two nodes, in either direction."""
        if not (0 <= a < len(self._nodes) and 0 <= b < len(self._nodes)):
            return False
        return b in self._adjacency[a]

    def node_indices(self) -> range:
        return range(len(self._nodes))

    def neighbors(self, index: int) -> list[int]:
        """Indices of the nodes joined to the given node."""
        self._check(index)
        return list(self._adjacency[index])

    def edge_count(self) -> int:
        return len(self._edges)

    def __getitem__(self, index: int) -> Product:
        self._check(index)
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._nodes)