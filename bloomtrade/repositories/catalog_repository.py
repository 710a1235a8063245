# ==============================================================================
# REPOSITORIO DE CATÁLOGO
# ==============================================================================
# Tabla de solo lectura usada por el formulario de pedidos para capturar
# nombre y precio al elegir un producto en un ítem.
#
# Es una tabla fija y síncrona que nunca falla. Para usar un servicio real
# basta con otra clase que implemente ICatalog (lookup_product / get_all);
# el formulario no cambia.
# ==============================================================================

from typing import Any, Dict, Iterable, List, Optional

from bloomtrade.models import CatalogEntry, parse_price
from bloomtrade.repositories.seed_data import CATALOG_ENTRIES


class StaticCatalog:
    """Catálogo en memoria, inmutable tras la construcción."""

    def __init__(self, entries: Iterable[Dict[str, Any]] = None):
        """
        Args:
            entries: Entradas {id, name, price}; por defecto la tabla de referencia
        """
        source = CATALOG_ENTRIES if entries is None else entries
        self._entries: Dict[str, CatalogEntry] = {}
        for data in source:
            entry = CatalogEntry(
                id=str(data['id']),
                name=data.get('name', ''),
                price=parse_price(data.get('price', 0)),
            )
            self._entries[entry.id] = entry

    def lookup_product(self, product_id: str) -> Optional[CatalogEntry]:
        """
        Busca una entrada por ID.

        Returns:
            La entrada o None si no existe
        """
        return self._entries.get(product_id)

    def get_all(self) -> List[CatalogEntry]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
