# ==============================================================================
# REPOSITORIO DE AUDITORÍA
# ==============================================================================
# Bitácora en memoria de las altas, cambios y bajas.
# Se almacena como lista de diccionarios, más reciente primero.
# ==============================================================================

from typing import Any, Dict, List

from bloomtrade.models import AuditLog
from bloomtrade.repositories.base import LogRepository


class AuditRepository(LogRepository):
    """
    Repositorio para el log de auditoría.

    Formato de cada registro:
        {
            "type": "PEDIDO",
            "user": "sistema",
            "message": "Pedido 1004 creado por sistema - Total: $749.97",
            "timestamp": "2024-01-01 10:00:00",
            "related_id": "1004",
            "details": {...}
        }
    """

    # Límite de registros para no crecer sin control
    MAX_LOGS = 10000

    def load(self) -> List[Dict[str, Any]]:
        """
        Carga todos los logs de auditoría.

        Returns:
            Lista de logs (más recientes primero)
        """
        return self.get_all()

    def log(
        self,
        log_type: str,
        user: str,
        message: str,
        related_id: str = '',
        details: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """
        Registra un nuevo evento de auditoría.

        Args:
            log_type: Tipo de evento (PRODUCTO, PEDIDO)
            user: Usuario que realizó la acción
            message: Mensaje descriptivo humanizado
            related_id: ID relacionado (producto o pedido)
            details: Detalles adicionales

        Returns:
            El registro insertado
        """
        entry = AuditLog(
            type=log_type,
            user=user or 'sistema',
            message=message,
            related_id=related_id,
            details=details or {}
        ).to_dict()
        self.insert(entry)
        return entry

    def search(self, query: str = '', log_type: str = None) -> List[Dict[str, Any]]:
        """
        Busca logs por texto (mensaje, usuario, ID relacionado) y tipo.

        Args:
            query: Texto a buscar (sin distinguir mayúsculas)
            log_type: Filtrar por tipo

        Returns:
            Lista de logs que coinciden
        """
        logs = self.load()

        if log_type:
            logs = [l for l in logs if l.get('type') == log_type]

        q = (query or '').strip().lower()
        if q:
            logs = [
                l for l in logs
                if q in l.get('message', '').lower()
                or q in l.get('user', '').lower()
                or q in str(l.get('related_id', '')).lower()
            ]
        return logs
