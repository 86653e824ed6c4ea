"""Microsoft Graph (To-Do) integration."""

from .client import GRAPH_SCOPE, GraphCredentials, GraphTodoClient

__all__ = ["GRAPH_SCOPE", "GraphCredentials", "GraphTodoClient"]
