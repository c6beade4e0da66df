from megastore_graphs.models import Product, ProductGraph
from megastore_graphs.recommendation import (
    calculate_similarity_weight,
    recommended_products,
)


def test_calculate_similarity_weight():
    p1 = Product(1, "Produto A", "Categoria X", 100.0, 50)
    p2 = Product(2, "Produto B", "Categoria X", 105.0, 55)
    assert calculate_similarity_weight(p1, p2) == 9


def test_similarity_weight_is_symmetric_and_zero_for_unrelated():
    p1 = Product(1, "A", "X", 100.0, 50)
    p2 = Product(2, "B", "Y", 5000.0, 90)
    assert calculate_similarity_weight(p1, p2) == 0
    assert calculate_similarity_weight(p2, p1) == 0


def test_recommended_products_missing_id(capsys):
    graph = ProductGraph()
    graph.add_node(Product(1, "A", "X", 1.0, 1))
    assert recommended_products(graph, 42) == []
    assert "Produto com id 42 não encontrado" in capsys.readouterr().out


def test_recommended_products_orders_by_weight_and_excludes_self():
    graph = ProductGraph()
    graph.add_node(Product(1, "Base", "X", 100.0, 50))
    graph.add_node(Product(2, "Price only", "Y", 150.0, 99))
    graph.add_node(Product(3, "Category", "X", 5000.0, 99))
    graph.add_node(Product(4, "Unrelated", "Z", 9000.0, 0))
    result = recommended_products(graph, 1)
    assert [p.id for p in result] == [3, 2]


def test_recommended_products_caps_at_five():
    graph = ProductGraph()
    for pid in range(1, 10):
        graph.add_node(Product(pid, f"P{pid}", "X", 10.0, 10))
    result = recommended_products(graph, 1)
    assert len(result) == 5
    assert all(p.id != 1 for p in result)


def test_recommended_products_none_similar(capsys):
    graph = ProductGraph()
    graph.add_node(Product(1, "A", "X", 1.0, 0))
    graph.add_node(Product(2, "B", "Y", 900.0, 100))
    assert recommended_products(graph, 1) == []
    assert "Nenhum produto similar encontrado." in capsys.readouterr().out