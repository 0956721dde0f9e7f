import heapq

from grafos.exceptions import InvalidArgument


def top_k_sort(k, items, key=None):
    """
    Devuelve los 'k' elementos más pequeños de 'items', en orden ascendente.
    Si k es mayor que la cantidad de elementos, devuelve todos ordenados.
    Con 'key', los elementos de igual clave conservan su orden original.
    """
    if k < 0:
        raise InvalidArgument(f"k debe ser no negativo, se recibió {k}")
    if k == 0:
        return []
    return heapq.nsmallest(k, items, key=key)
