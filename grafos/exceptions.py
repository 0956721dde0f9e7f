class GraphError(Exception):
    """Error base de la librería."""


class InvalidArgument(GraphError, ValueError):
    """Colección o elemento nulo, peso negativo o vértice desconocido."""


class DuplicateElement(GraphError, ValueError):
    """make_set sobre un elemento que ya estaba registrado."""


class UnknownElement(GraphError, LookupError):
    """find_set / union sobre un elemento nunca registrado."""


class AlreadyUnitedError(GraphError, ValueError):
    """union sobre dos elementos que ya pertenecen al mismo conjunto."""


class NoPathExists(GraphError):
    """No existe camino entre el origen y el destino."""
