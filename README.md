# megastore_graphs

A small product catalogue kept as an undirected graph. Products in the same
category, or whose popularity is within 10 points of each other, are linked by
an edge. The catalogue can be searched by exact name or exact category, or by a
case-insensitive term, and it gives up to five recommendations for a product.

Messages printed by the command and by the search and recommendation functions
are in Portuguese.

## Installation

```
pip install .
```

## Command line

```
megastore-graphs search-nome "Mouse Gamer"
megastore-graphs search-categoria "Periféricos"
megastore-graphs recomendar 1
```

- `search-nome <name>` prints the name, category and price of every product
  whose name matches exactly.
- `search-categoria <category>` does the same for an exact category.
- `recomendar <id>` takes a product id (a non-negative whole number) and lists
  the most similar products, best first.

With fewer than two arguments a usage message goes to standard error. An
unknown command or an id that is not a valid number is reported on standard
error. The command always exits with status 0.

## Library use

```python
from megastore_graphs.models import Product, ProductGraph
from megastore_graphs.graph_utils import connect_similar_products
from megastore_graphs.recommendation import recommended_products, calculate_similarity_weight
from megastore_graphs.search import search_by_name, search_by_category, search_products
from megastore_graphs.cli import build_catalog

graph, by_name, by_category = build_catalog()
print(search_by_category(graph, by_category, "Hardware"))
print(recommended_products(graph, 1))
```

- `Product` is a dataclass with `id`, `name`, `category`, `price` and
  `popularity`.
- `ProductGraph` holds products as nodes addressed by insertion index, with
  `add_node`, `add_edge`, `contains_edge`, `neighbors`, `node_indices`,
  `edge_count`, indexing, `len()` and iteration over its products.
- `connect_similar_products(graph)` adds an edge between every pair of products
  that share a category or whose popularity differs by at most 10.
- `calculate_similarity_weight(a, b)` scores 5 for the same category, 3 for
  popularity within 10 points, and 1 for prices within 200 of each other.
- `recommended_products(graph, product_id)` prints and returns up to five other
  products with a score above zero, highest score first; it returns an empty
  list when the id is unknown or nothing is similar.
- `search_by_name` and `search_by_category` look a key up in a mapping from
  names or categories to node indices and return the matching products.
- `search_products(graph, term)` prints and returns products whose name or
  category contains the term, ignoring case.
- `build_catalog()` returns the built-in catalogue graph together with its name
  and category indices.

## Limitations

The catalogue is fixed in the package: there is no way to load products from a
file or database, or to save changes. The command line offers no term search;
`search_products` is available only from Python.

## Tests

```
pip install .[test]
pytest
```