"""Classic sorting, searching, graph, arithmetic and text-pattern algorithms."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "graphs", "patterns", "searching", "sorting"]