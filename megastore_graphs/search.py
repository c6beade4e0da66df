"""Product lookup by text, name and category."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .models import Product, ProductGraph


def search_products(graph: ProductGraph, term: str) -> list[Product]:
    """Print and return products whose name or category contains the term, ignoring case."""
    needle = term.lower()
    found = [
        product
        for product in graph
        if needle in product.name.lower() or needle in product.category.lower()
    ]
    for product in found:
        print(f"Encontrado: {product!r}")
    if not found:
        print(f"Nenhum produto encontrado com o termo: '{needle}'")
    return found


def _lookup(
    graph: ProductGraph, index: Mapping[str, Sequence[int]], key: str
) -> list[Product]:
    return [graph[i] for i in index.get(key, ())]


def search_by_name(
    graph: ProductGraph, index: Mapping[str, Sequence[int]], name: str
) -> list[Product]:
    """Products whose exact name maps to node indices in the index."""
    return _lookup(graph, index, name)


def search_by_category(
    graph: ProductGraph, index: Mapping[str, Sequence[int]], category: str
) -> list[Product]:
    """Products whose exact category maps to node indices in the index."""
    return _lookup(graph, index, category)