# ==============================================================================
# SERVICIO DE ESTADÍSTICAS DEL PANEL
# ==============================================================================
# Calcula las tarjetas del panel principal a partir de los datos vivos.
#
# REGLA DE INGRESOS: los pedidos "cancelled" no suman al ingreso.
# ==============================================================================

from typing import Any, Callable, Dict, List, Optional

from bloomtrade.models import Order, OrderStatus, Product, format_money
from bloomtrade.models.entities import STOCK_OUT


class StatsService:
    """
    Servicio para las estadísticas del panel.

    Los datos se obtienen con funciones cargadoras inyectadas, así el
    servicio no depende de cómo se almacenan productos y pedidos.
    """

    # Estados que no cuentan como ingreso
    EXCLUDED_FROM_REVENUE = frozenset([OrderStatus.CANCELLED])

    def __init__(
        self,
        products_loader: Callable[[], List[Product]] = None,
        orders_loader: Callable[[], List[Order]] = None
    ):
        """
        Inicializa el servicio.

        Args:
            products_loader: Función que retorna la lista de productos
            orders_loader: Función que retorna la lista de pedidos
        """
        self._products_loader = products_loader
        self._orders_loader = orders_loader

    def _load_products(self) -> List[Product]:
        return self._products_loader() if self._products_loader else []

    def _load_orders(self) -> List[Order]:
        return self._orders_loader() if self._orders_loader else []

    def revenue(self, orders: Optional[List[Order]] = None) -> float:
        """Suma de totales de pedidos no cancelados."""
        if orders is None:
            orders = self._load_orders()
        return sum(o.total for o in orders if o.status not in self.EXCLUDED_FROM_REVENUE)

    def unique_customers(self, orders: Optional[List[Order]] = None) -> int:
        """Clientes distintos, identificados por email (sin mayúsculas)."""
        if orders is None:
            orders = self._load_orders()
        emails = {o.customer_email.strip().lower() for o in orders if o.customer_email.strip()}
        return len(emails)

    def compute_dashboard(self) -> Dict[str, Any]:
        """
        Calcula todas las tarjetas del panel.

        Returns:
            Dict con totales de productos, pedidos, ingresos y clientes
        """
        products = self._load_products()
        orders = self._load_orders()

        by_status = {status.value: 0 for status in OrderStatus}
        for order in orders:
            by_status[order.status.value] += 1

        revenue = self.revenue(orders)

        return {
            'total_products': len(products),
            'active_products': sum(1 for p in products if p.is_active),
            'out_of_stock_products': sum(1 for p in products if p.stock_level == STOCK_OUT),
            'total_orders': len(orders),
            'orders_by_status': by_status,
            'revenue': revenue,
            'revenue_display': format_money(revenue),
            'unique_customers': self.unique_customers(orders),
        }
