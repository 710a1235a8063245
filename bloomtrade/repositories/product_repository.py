# ==============================================================================
# REPOSITORIO DE PRODUCTOS
# ==============================================================================
# Lista en memoria de Product, más reciente primero.
# ==============================================================================

from bloomtrade.models import Product
from bloomtrade.repositories.base import ListRepository
from bloomtrade.repositories.seed_data import SEED_PRODUCTS


class ProductRepository(ListRepository):
    """
    Repositorio para gestión de productos.

    Los IDs generados continúan la numeración de los existentes
    (con los datos de demostración, el primero nuevo es "4").
    """

    ID_FLOOR = 0

    def __init__(self, seed: bool = False):
        """
        Inicializa el repositorio de productos.

        Args:
            seed: Si True, carga los productos de demostración
        """
        records = [Product.from_dict(p) for p in SEED_PRODUCTS] if seed else []
        super().__init__(records)
