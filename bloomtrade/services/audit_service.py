# ==============================================================================
# SERVICIO DE AUDITORÍA
# ==============================================================================
# Centraliza el registro de altas, cambios y bajas de productos y pedidos.
# Formatea mensajes humanizados y categoriza eventos.
# ==============================================================================

from typing import Any, Dict, List

from bloomtrade.models import AuditType, format_money
from bloomtrade.repositories.audit_repository import AuditRepository


class AuditService:
    """
    Servicio para registro y consulta de auditoría.

    Centraliza:
    - Registro de eventos con mensajes humanizados
    - Categorización de eventos (PRODUCTO, PEDIDO)
    - Búsqueda y filtrado de logs
    """

    TYPE_PRODUCTO = AuditType.PRODUCTO.value
    TYPE_PEDIDO = AuditType.PEDIDO.value

    def __init__(self, audit_repo: AuditRepository):
        """
        Inicializa el servicio de auditoría.

        Args:
            audit_repo: Repositorio de auditoría
        """
        self.audit_repo = audit_repo

    # =========================================================================
    # REGISTRO DE EVENTOS
    # =========================================================================

    def log(
        self,
        log_type: str,
        user: str,
        message: str,
        related_id: str = '',
        details: Dict[str, Any] = None
    ) -> None:
        """
        Registra un evento de auditoría genérico.

        Args:
            log_type: Tipo de evento (PRODUCTO, PEDIDO)
            user: Usuario que realizó la acción
            message: Mensaje descriptivo humanizado
            related_id: ID relacionado
            details: Detalles adicionales
        """
        self.audit_repo.log(log_type, user, message, related_id, details)

    def log_product_created(self, user: str, pid: str, name: str) -> None:
        """Registra la creación de un producto."""
        user = user or 'sistema'
        message = f"Producto '{name}' (#{pid}) creado por {user}"
        self.log(self.TYPE_PRODUCTO, user, message, pid, {'name': name})

    def log_product_updated(
        self,
        user: str,
        pid: str,
        name: str,
        changes: Dict[str, Any]
    ) -> None:
        """
        Registra la actualización de un producto.

        Args:
            changes: Campos que cambiaron {campo: {'from': x, 'to': y}}
        """
        user = user or 'sistema'
        if changes:
            fields = ', '.join(sorted(changes))
            message = f"Producto '{name}' (#{pid}) actualizado por {user} - Campos: {fields}"
        else:
            message = f"Producto '{name}' (#{pid}) guardado sin cambios por {user}"
        self.log(self.TYPE_PRODUCTO, user, message, pid, {'changes': changes})

    def log_product_deleted(self, user: str, pid: str, name: str) -> None:
        """Registra la eliminación de un producto."""
        user = user or 'sistema'
        message = f"Producto '{name}' (#{pid}) eliminado por {user}"
        self.log(self.TYPE_PRODUCTO, user, message, pid, {'name': name})

    def log_order_created(
        self,
        user: str,
        order_id: str,
        customer: str,
        total: float,
        items_count: int
    ) -> None:
        """Registra la creación de un pedido."""
        user = user or 'sistema'
        message = (
            f"Pedido {order_id} de {customer} creado por {user} - "
            f"Total: ${format_money(total)} - {items_count} ítems"
        )
        self.log(
            self.TYPE_PEDIDO,
            user,
            message,
            order_id,
            {'customer': customer, 'total': total, 'items_count': items_count}
        )

    def log_order_updated(
        self,
        user: str,
        order_id: str,
        old_total: float,
        new_total: float,
        old_status: str,
        new_status: str
    ) -> None:
        """Registra la actualización de un pedido (total y estado)."""
        user = user or 'sistema'
        message = f"Pedido {order_id} actualizado por {user} - Total: ${format_money(new_total)}"
        if old_status != new_status:
            message += f" - Estado: {old_status} → {new_status}"
        self.log(
            self.TYPE_PEDIDO,
            user,
            message,
            order_id,
            {
                'old_total': old_total,
                'new_total': new_total,
                'from': old_status,
                'to': new_status,
            }
        )

    def log_order_deleted(self, user: str, order_id: str, customer: str) -> None:
        """Registra la eliminación de un pedido."""
        user = user or 'sistema'
        message = f"Pedido {order_id} de {customer} eliminado por {user}"
        self.log(self.TYPE_PEDIDO, user, message, order_id, {'customer': customer})

    # =========================================================================
    # CONSULTAS
    # =========================================================================

    def search_logs(self, query: str = '', log_type: str = None) -> List[Dict[str, Any]]:
        """
        Busca logs por texto y tipo.

        Args:
            query: Texto a buscar
            log_type: Tipo de evento (opcional)

        Returns:
            Logs que coinciden
        """
        return self.audit_repo.search(query, log_type)

    def get_logs_for(self, related_id: str) -> List[Dict[str, Any]]:
        """Historial de un producto o pedido."""
        return [l for l in self.audit_repo.load() if l.get('related_id') == related_id]
