# =============================================================================
# Infiltration Pathing Engine - Exceptions
# =============================================================================
"""
Error taxonomy raised by the graph core and the mission layer.

Every error derives from GraphError so callers can catch the whole family,
and from the closest built-in so generic handlers keep working.
"""


class GraphError(Exception):
    """Base class for all graph and mission errors"""


class InvalidVertex(GraphError, ValueError):
    """An operation referenced a vertex that is not in the graph"""


class DuplicateVertex(GraphError, ValueError):
    """A vertex equal to the inserted value is already in the graph"""


class VertexNotFound(GraphError, LookupError):
    """Lookup of a vertex value with no match"""


class IndexOutOfRange(GraphError, IndexError):
    """Lookup of a vertex index outside [0, size)"""


class EmptyOperation(GraphError):
    """Operation attempted on an empty structure"""


class MissionError(GraphError):
    """Mission state cannot answer the query (no target, no entry, no route)"""
