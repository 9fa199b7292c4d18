"""Classic contest algorithms: graphs, trees, range structures, number theory, sorting and knapsacks."""

__version__ = "0.1.0"