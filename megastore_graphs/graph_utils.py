"""Building edges between related products."""

from __future__ import annotations

from itertools import combinations

from .models import ProductGraph

POPULARITY_TOLERANCE = 10


def connect_similar_products(graph: ProductGraph) -> None:
    """Join every pair of products sharing a category or close in popularity."""
    for i, j in combinations(list(graph.node_indices()), 2):
        a, b = graph[i], graph[j]
        same_category = a.category == b.category
        close_popularity = abs(a.popularity - b.popularity) <= POPULARITY_TOLERANCE
        if same_category or close_popularity:
            graph.add_edge(i, j)