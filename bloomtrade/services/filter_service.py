# ==============================================================================
# FILTRO DE BÚSQUEDA
# ==============================================================================
# Proyección pura: dada una consulta y la lista actual, devuelve la
# subsecuencia de registros donde la consulta (sin distinguir mayúsculas)
# aparece en al menos uno de los campos buscables.
#
# No modifica nada y no guarda índices: se recalcula en cada llamada.
# ==============================================================================

from enum import Enum
from typing import Any, List, Sequence

# Campos buscables por entidad
PRODUCT_SEARCH_FIELDS = ('name', 'description', 'category')
ORDER_SEARCH_FIELDS = ('id', 'customer_name', 'customer_email', 'status')


def _field_text(record: Any, field: str) -> str:
    value = getattr(record, field, '')
    if isinstance(value, Enum):
        value = value.value
    return '' if value is None else str(value)


def matches(record: Any, query: str, fields: Sequence[str]) -> bool:
    """True si la consulta aparece en alguno de los campos del registro."""
    needle = query.lower()
    return any(needle in _field_text(record, field).lower() for field in fields)


def filter_records(records: Sequence[Any], query: str, fields: Sequence[str]) -> List[Any]:
    """
    Filtra registros por texto libre.

    Args:
        records: Registros en orden de listado
        query: Texto a buscar; vacío devuelve todos
        fields: Nombres de atributos donde buscar

    Returns:
        Nueva lista con los registros que coinciden, en el mismo orden
    """
    if not query:
        return list(records)
    return [record for record in records if matches(record, query, fields)]


def filter_products(products: Sequence[Any], query: str) -> List[Any]:
    """Busca en nombre, descripción y categoría."""
    return filter_records(products, query, PRODUCT_SEARCH_FIELDS)


def filter_orders(orders: Sequence[Any], query: str) -> List[Any]:
    """Busca en ID, nombre y email del cliente, y estado."""
    return filter_records(orders, query, ORDER_SEARCH_FIELDS)
