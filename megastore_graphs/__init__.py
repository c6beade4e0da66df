"""Product catalogue graph with similarity links, search, recommendations and a command line."""

__version__ = "0.1.0"
__all__ = ["models", "graph_utils", "recommendation", "search", "cli"]