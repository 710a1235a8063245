# ==============================================================================
# SERVICIO DE PEDIDOS
# ==============================================================================
# Centraliza la lógica de negocio de pedidos: alta, edición, baja y búsqueda.
#
# REGLA PRINCIPAL: el total de un pedido es siempre la suma de
# quantity * unit_price de sus ítems. Order.total lo deriva en cada acceso,
# así que queda recalculado en cada alta y cada edición.
#
# El estado es un campo libre dentro del enum: no hay flujo de transiciones.
# ==============================================================================

from typing import List, Optional

from bloomtrade.models import Order, OrderDraft, OrderStatus, today
from bloomtrade.performance_logger import profile_function
from bloomtrade.repositories.interfaces import IRecordRepository
from bloomtrade.services.audit_service import AuditService
from bloomtrade.services.filter_service import filter_orders


class OrderService:
    """
    Servicio para gestión de pedidos.

    Responsabilidades:
    - CRUD de pedidos
    - Total derivado de los ítems
    - Búsqueda por texto libre
    """

    def __init__(
        self,
        order_repo: IRecordRepository,
        audit_service: AuditService = None
    ):
        """
        Inicializa el servicio de pedidos.

        Args:
            order_repo: Repositorio de pedidos
            audit_service: Servicio de auditoría (opcional)
        """
        self.order_repo = order_repo
        self.audit_service = audit_service

    # =========================================================================
    # CONSULTAS
    # =========================================================================

    def get_all_orders(self) -> List[Order]:
        """Todos los pedidos, más recientes primero."""
        return self.order_repo.get_all()

    def get_order(self, order_id: str) -> Optional[Order]:
        """Obtiene un pedido por su ID."""
        return self.order_repo.get_by_id(order_id)

    def search_orders(self, query: str = '') -> List[Order]:
        """
        Busca pedidos por ID, cliente, email o estado.

        Args:
            query: Texto a buscar (vacío = todos)

        Returns:
            Pedidos que coinciden, en orden de listado
        """
        return filter_orders(self.order_repo.get_all(), query)

    def get_orders_by_status(self, status: OrderStatus) -> List[Order]:
        """Pedidos en un estado dado (un estado inválido lanza ValueError)."""
        return self.order_repo.get_by_status(status)

    # =========================================================================
    # OPERACIONES DE PEDIDOS
    # =========================================================================

    @profile_function(name="Crear pedido")
    def create_order(self, draft: OrderDraft, user: str = None) -> Order:
        """
        Crea un pedido a partir de un borrador.

        Args:
            draft: Cliente, dirección, estado e ítems
            user: Usuario que crea (para auditoría)

        Returns:
            El pedido creado (ya insertado al inicio del listado)
        """
        order = Order(
            id=self.order_repo.next_id(),
            created_at=today(),
            **draft.fields()
        )
        self.order_repo.prepend(order)

        if self.audit_service:
            self.audit_service.log_order_created(
                user, order.id, order.customer_name, order.total, len(order.items)
            )

        return order

    @profile_function(name="Editar pedido")
    def update_order(
        self,
        order_id: str,
        draft: OrderDraft,
        user: str = None
    ) -> Optional[Order]:
        """
        Actualiza un pedido con los campos del borrador.
        Conserva el ID y la fecha de creación; el total se recalcula.

        Args:
            order_id: ID del pedido
            draft: Nuevos valores de los campos editables
            user: Usuario que actualiza (para auditoría)

        Returns:
            El pedido actualizado, o None si el ID no existe
        """
        existing = self.order_repo.get_by_id(order_id)
        if existing is None:
            return None

        updated = Order(
            id=existing.id,
            created_at=existing.created_at,
            **draft.fields()
        )
        self.order_repo.replace(order_id, updated)

        if self.audit_service:
            self.audit_service.log_order_updated(
                user,
                order_id,
                existing.total,
                updated.total,
                existing.status.value,
                updated.status.value
            )

        return updated

    @profile_function(name="Eliminar pedido")
    def delete_order(self, order_id: str, user: str = None) -> Optional[Order]:
        """
        Elimina un pedido (sin papelera ni historial).

        Args:
            order_id: ID del pedido
            user: Usuario que elimina (para auditoría)

        Returns:
            El pedido eliminado o None si no existía
        """
        removed = self.order_repo.delete(order_id)

        if removed is not None and self.audit_service:
            self.audit_service.log_order_deleted(user, order_id, removed.customer_name)

        return removed
