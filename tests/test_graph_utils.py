from megastore_graphs.graph_utils import connect_similar_products
from megastore_graphs.models import Product, ProductGraph


def test_connect_similar_products():
    graph = ProductGraph()
    n1 = graph.add_node(Product(1, "Mouse Gamer", "Periféricos", 200.0, 30))
    n2 = graph.add_node(Product(2, "Teclado Gamer", "Periféricos", 210.0, 27))
    n3 = graph.add_node(Product(3, "Notebook", "Informática", 3000.0, 80))

    connect_similar_products(graph)

    assert graph.contains_edge(n1, n2)
    assert not graph.contains_edge(n1, n3)
    assert not graph.contains_edge(n2, n3)


def test_popularity_boundary():
    graph = ProductGraph()
    a = graph.add_node(Product(1, "A", "X", 1.0, 20))
    b = graph.add_node(Product(2, "B", "Y", 1.0, 30))
    c = graph.add_node(Product(3, "C", "Z", 1.0, 41))

    connect_similar_products(graph)

    assert graph.contains_edge(a, b)
    assert not graph.contains_edge(b, c)
    assert graph.edge_count() == 1


def test_same_category_connects_regardless_of_popularity():
    graph = ProductGraph()
    a = graph.add_node(Product(1, "A", "X", 1.0, 0))
    b = graph.add_node(Product(2, "B", "X", 1.0, 500))
    connect_similar_products(graph)
    assert graph.contains_edge(b, a)