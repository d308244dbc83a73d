"""Exceptions raised by the graph store and the interaction log."""


class SketchGraphError(Exception):
    """Base exception for editor core errors."""

    pass


class GraphStoreError(SketchGraphError):
    """Base exception for rejected graph store operations."""

    pass


class UnknownNodeError(GraphStoreError):
    """Raised when an edge operation references a node that is not live."""

    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"Unknown node: {node_id}")


class NotFoundError(GraphStoreError):
    """Raised when a removal references an unknown node or edge."""

    def __init__(self, identity: int, kind: str = "element"):
        self.identity = identity
        self.kind = kind
        super().__init__(f"No {kind} with identity {identity}")


class DuplicateEdgeError(GraphStoreError):
    """Raised when duplicate edges are rejected and the pair is already connected."""

    def __init__(self, node_a: int, node_b: int):
        self.node_a = node_a
        self.node_b = node_b
        super().__init__(f"Nodes {node_a} and {node_b} are already connected")


class InteractionLogError(SketchGraphError):
    """Raised when the interaction log would break its marker invariant."""

    pass


class SessionError(SketchGraphError):
    """Base exception for session scripts that cannot be replayed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class SessionLoadError(SessionError):
    """Raised when a session script cannot be read or is not YAML."""

    pass


class SessionValidationError(SessionError):
    """Raised when session steps fail validation.

    ``errors`` holds one ``{"loc", "step", "msg", "type"}`` dict per problem,
    where ``step`` is the 1-based step number or None for top-level fields.
    """

    def __init__(
        self, message: str, errors: list[dict] | None = None, path: str | None = None
    ):
        self.errors = errors or []
        super().__init__(message, path)
