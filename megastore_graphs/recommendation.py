"""Similarity scoring and recommendations."""

from __future__ import annotations

from .models import Product, ProductGraph

MAX_RECOMMENDATIONS = 5


def calculate_similarity_weight(a: Product, b: Product) -> int:
    """Score how alike two products are: category 5, popularity 3, price 1."""
    weight = 0
    if a.category == b.category:
        weight += 5
    if abs(a.popularity - b.popularity) <= 10:
        weight += 3
    if abs(a.price - b.price) <= 200.0:
        weight += 1
    return weight


def recommended_products(graph: ProductGraph, product_id: int) -> list[Product]:
    """Return up to five products most similar to the one with the given id."""
    base_index = next(
        (i for i in graph.node_indices() if graph[i].id == product_id), None
    )
    if base_index is None:
        print(f"Produto com id {product_id} não encontrado")
        return []

    base = graph[base_index]
    print(f"Recomendando para: {base!r}")

    scored = (
        (graph[i], calculate_similarity_weight(base, graph[i]))
        for i in graph.node_indices()
        if i != base_index
    )
    candidates = sorted(
        ((p, w) for p, w in scored if w > 0), key=lambda pair: pair[1], reverse=True
    )

    if not candidates:
        print("Nenhum produto similar encontrado.")
        return []

    top = candidates[:MAX_RECOMMENDATIONS]
    print("Produtos recomendados:")
    for product, weight in top:
        print(f"- {product!r} [similaridade: {weight}]")
    return [product for product, _ in top]