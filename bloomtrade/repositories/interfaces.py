# ==============================================================================
# INTERFACES DE REPOSITORIOS
# ==============================================================================
#
# Contratos que cumplen los repositorios en memoria. Los servicios dependen
# de estas interfaces, no de las clases concretas, así que un backend real
# (API o base de datos) solo requiere una implementación nueva registrada
# en app_container.py.
#
# ==============================================================================

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from bloomtrade.models import CatalogEntry


# ==============================================================================
# INTERFACES BASE
# ==============================================================================

@runtime_checkable
class IRecordRepository(Protocol):
    """
    Interfaz para repositorios de registros con ID.
    Usado por: Productos, Pedidos.
    """

    def get_all(self) -> List[Any]:
        """Obtiene todos los registros en orden de listado."""
        ...

    def get_by_id(self, record_id: str) -> Optional[Any]:
        """Obtiene un registro por ID."""
        ...

    def next_id(self) -> str:
        """Genera un ID que no existe en el repositorio."""
        ...

    def prepend(self, record: Any) -> None:
        """Agrega un registro al inicio."""
        ...

    def replace(self, record_id: str, record: Any) -> bool:
        """Reemplaza un registro; False si el ID no existe."""
        ...

    def delete(self, record_id: str) -> Optional[Any]:
        """Elimina un registro; retorna el eliminado o None."""
        ...


# ==============================================================================
# INTERFACES ESPECÍFICAS POR DOMINIO
# ==============================================================================

@runtime_checkable
class ICatalog(Protocol):
    """
    Interfaz del catálogo consultado al elegir el producto de un ítem.
    """

    def lookup_product(self, product_id: str) -> Optional[CatalogEntry]:
        """Entrada del catálogo o None si no existe."""
        ...

    def get_all(self) -> List[CatalogEntry]:
        """Todas las entradas (para el selector)."""
        ...


@runtime_checkable
class IAuditRepository(Protocol):
    """Interfaz para el repositorio de auditoría."""

    def load(self) -> List[Dict[str, Any]]:
        """Carga todos los logs (más recientes primero)."""
        ...

    def log(
        self,
        log_type: str,
        user: str,
        message: str,
        related_id: str = '',
        details: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """Registra un evento."""
        ...

    def search(self, query: str = '', log_type: str = None) -> List[Dict[str, Any]]:
        """Busca logs por texto y tipo."""
        ...
