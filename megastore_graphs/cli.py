"""Command-line front end over a built-in product catalogue."""

from __future__ import annotations

import re
import sys
from collections import defaultdict

from .graph_utils import connect_similar_products
from .models import Product, ProductGraph
from .recommendation import recommended_products
from .search import search_by_category, search_by_name

_CATALOG = [
    Product(1, "Mouse Gamer", "Periféricos", 199.90, 25),
    Product(2, "Headset Gamer", "Periféricos", 539.90, 15),
    Product(3, "Teclado sem fio", "Periféricos", 1299.90, 40),
    Product(4, "Notebook Lenovo", "Informática", 2999.90, 60),
    Product(5, "Webcam HD", "Periféricos", 250.00, 22),
    Product(6, "Monitor 24 polegadas", "Informática", 849.90, 35),
    Product(7, "Cadeira Gamer", "Móveis", 899.99, 28),
    Product(8, "SSD 1TB", "Armazenamento", 599.90, 32),
    Product(9, "HD Externo 2TB", "Armazenamento", 379.90, 27),
    Product(10, "Placa de Vídeo RTX 3060", "Hardware", 2499.00, 50),
    Product(11, "Fonte 750W", "Hardware", 499.90, 20),
    Product(12, "Mesa Digitalizadora", "Design", 699.00, 18),
    Product(13, "Mousepad RGB", "Periféricos", 129.90, 22),
    Product(14, "MacBook Air M1", "Informática", 6999.00, 45),
    Product(15, "Impressora Multifuncional", "Impressão", 799.00, 30),
    Product(16, "Cabo HDMI 2m", "Acessórios", 29.90, 12),
    Product(17, "Adaptador USB-C", "Acessórios", 39.90, 10),
]

_ID_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_ID = 2**32 - 1


def build_catalog() -> tuple[ProductGraph, dict[str, list[int]], dict[str, list[int]]]:
    """Build the catalogue graph with its name and category indices."""
    graph = ProductGraph()
    by_name: defaultdict[str, list[int]] = defaultdict(list)
    by_category: defaultdict[str, list[int]] = defaultdict(list)
    for template in _CATALOG:
        product = Product(
            template.id, template.name, template.category, template.price, template.popularity
        )
        node = graph.add_node(product)
        by_name[product.name].append(node)
        by_category[product.category].append(node)
    connect_similar_products(graph)
    return graph, dict(by_name), dict(by_category)


def _format_price(price: float) -> str:
    text = repr(float(price))
    return text[:-2] if text.endswith(".0") else text


def _describe(product: Product) -> str:
    return (
        f"Nome: {product.name}, Categoria: {product.category}, "
        f"Preço: R${_format_price(product.price)}"
    )


def _parse_id(text: str) -> int | None:
    if not _ID_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _MAX_ID else None


def main(argv: list[str] | None = None) -> int:
    """Run one command: search-nome, search-categoria or recomendar."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Uso: megastore-graphs <comando> <argumento>", file=sys.stderr)
        print(
            "Comandos disponíveis: search-nome, search-categoria, recomendar",
            file=sys.stderr,
        )
        return 0

    command, argument = args[0], args[1]
    graph, by_name, by_category = build_catalog()

    if command == "search-nome":
        products = search_by_name(graph, by_name, argument)
        if not products:
            print(f"Nenhum produto encontrado com o nome '{argument}'")
        for product in products:
            print(_describe(product))
    elif command == "search-categoria":
        products = search_by_category(graph, by_category, argument)
        if not products:
            print(f"Nenhum produto encontrado na categoria '{argument}'")
        for product in products:
            print(_describe(product))
    elif command == "recomendar":
        product_id = _parse_id(argument)
        if product_id is None:
            print(
                f"ID do produto inválido para recomendação: {argument}",
                file=sys.stderr,
            )
            return 0
        recommended = recommended_products(graph, product_id)
        if not recommended:
            print(f"Nenhuma recomendação encontrada para '{argument}'")
        else:
            print(f"Recomendações para '{argument}':")
            for product in recommended:
                print(f"→ {_describe(product)}")
    else:
        print(f"Comando desconhecido: {command}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())