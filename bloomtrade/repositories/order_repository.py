# ==============================================================================
# REPOSITORIO DE PEDIDOS
# ==============================================================================
# Lista en memoria de Order, más reciente primero.
# ==============================================================================

from typing import List

from bloomtrade.models import Order, OrderStatus
from bloomtrade.repositories.base import ListRepository
from bloomtrade.repositories.seed_data import SEED_ORDERS


class OrderRepository(ListRepository):
    """
    Repositorio para gestión de pedidos.

    Los IDs son correlativos desde 1001. Un ID eliminado no se reutiliza
    mientras exista uno mayor, y nunca se repite uno vigente.
    """

    ID_FLOOR = 1000

    def __init__(self, seed: bool = False):
        """
        Inicializa el repositorio de pedidos.

        Args:
            seed: Si True, carga los pedidos de demostración
        """
        records = [Order.from_dict(o) for o in SEED_ORDERS] if seed else []
        super().__init__(records)

    def get_by_status(self, status: OrderStatus) -> List[Order]:
        """Pedidos en un estado dado."""
        return self.find_all_by('status', OrderStatus(status))

    def get_by_customer_email(self, email: str) -> List[Order]:
        """Pedidos de un cliente (email sin distinguir mayúsculas)."""
        target = (email or '').strip().lower()
        return [o for o in self._records if o.customer_email.strip().lower() == target]
