# ==============================================================================
# REPOSITORIO BASE - Colección ordenada en memoria
# ==============================================================================
# No hay archivos ni base de datos: los registros viven en una lista del
# proceso y se pierden al reiniciar. El orden de la lista es el orden del
# listado (más reciente primero).
# ==============================================================================

from typing import Any, Dict, Iterable, List, Optional
from abc import ABC, abstractmethod


class BaseRepository(ABC):
    """
    Clase base abstracta para los repositorios en memoria.

    Un solo actor (el usuario) dispara todas las mutaciones y cada operación
    corre completa antes de la siguiente, así que no se usan locks.
    """

    def __init__(self, records: Iterable[Any] = None):
        """
        Inicializa el repositorio.

        Args:
            records: Registros iniciales, en orden de listado
        """
        self._records: List[Any] = self._empty_data()
        for record in records or []:
            self._records.append(record)

    @abstractmethod
    def _empty_data(self) -> Any:
        """
        Retorna la estructura de datos vacía para este repositorio.
        Debe ser implementado por cada repositorio concreto.
        """
        pass

    def get_all(self) -> List[Any]:
        """
        Obtiene todos los registros.

        Returns:
            Copia de la lista (modificarla no altera el repositorio)
        """
        return list(self._records)

    def count(self) -> int:
        return len(self._records)


class ListRepository(BaseRepository):
    """
    Repositorio base para registros con atributo 'id'.

    Los IDs son strings; los generados son numéricos y crecientes a partir
    de ID_FLOOR, siempre por encima del mayor ID numérico presente.
    """

    # El primer ID generado en un repositorio vacío es ID_FLOOR + 1
    ID_FLOOR = 0

    def _empty_data(self) -> List:
        """Retorna lista vacía."""
        return []

    def get_by_id(self, record_id: str) -> Optional[Any]:
        """
        Obtiene un registro por su ID.

        Args:
            record_id: ID del registro

        Returns:
            El registro o None si no existe
        """
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def ids(self) -> List[str]:
        """IDs de todos los registros, en orden de listado."""
        return [record.id for record in self._records]

    def next_id(self) -> str:
        """
        Genera el siguiente ID disponible.

        Returns:
            ID numérico (como string) que no existe en el repositorio
        """
        taken = set(self.ids())
        numeric = []
        for record_id in taken:
            try:
                numeric.append(int(record_id))
            except (TypeError, ValueError):
                continue
        candidate = max([self.ID_FLOOR] + numeric) + 1
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def prepend(self, record: Any) -> None:
        """
        Agrega un registro al inicio (más reciente primero).

        Args:
            record: Registro nuevo
        """
        self._records.insert(0, record)

    def replace(self, record_id: str, record: Any) -> bool:
        """
        Reemplaza el registro con ese ID manteniendo su posición.

        Args:
            record_id: ID del registro a reemplazar
            record: Registro nuevo

        Returns:
            True si se reemplazó, False si el ID no existe
        """
        for index, existing in enumerate(self._records):
            if existing.id == record_id:
                self._records[index] = record
                return True
        return False

    def delete(self, record_id: str) -> Optional[Any]:
        """
        Elimina un registro.

        Args:
            record_id: ID del registro a eliminar

        Returns:
            Registro eliminado o None si no existía
        """
        for index, existing in enumerate(self._records):
            if existing.id == record_id:
                return self._records.pop(index)
        return None

    def find_all_by(self, field: str, value: Any) -> List[Any]:
        """
        Busca todos los registros cuyo campo coincide con el valor.

        Args:
            field: Nombre del atributo
            value: Valor a buscar

        Returns:
            Lista de registros que coinciden
        """
        return [r for r in self._records if getattr(r, field, None) == value]


class LogRepository(BaseRepository):
    """
    Repositorio base para registros tipo bitácora (diccionarios).
    Más reciente primero, con tope de tamaño.
    """

    MAX_LOGS = 10000

    def _empty_data(self) -> List:
        return []

    def insert(self, entry: Dict[str, Any]) -> None:
        """Inserta al inicio y recorta a MAX_LOGS."""
        self._records.insert(0, entry)
        if len(self._records) > self.MAX_LOGS:
            del self._records[self.MAX_LOGS:]
