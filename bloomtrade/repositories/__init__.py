# ==============================================================================
# CAPA DE REPOSITORIOS - Acceso a datos
# ==============================================================================
# Esta capa encapsula el almacenamiento de los registros. Hoy todo vive en
# memoria del proceso; las interfaces (métodos públicos) son las que usan
# los servicios, así que cambiar el almacenamiento no toca la lógica.
#
# ESTRUCTURA:
# ├── interfaces.py          → Protocolos/Interfaces (contratos)
# ├── base.py                → Clases base (ListRepository, LogRepository)
# ├── seed_data.py           → Datos de demostración
# ├── product_repository.py  → Productos
# ├── order_repository.py    → Pedidos
# ├── catalog_repository.py  → Catálogo del selector de productos
# └── audit_repository.py    → Bitácora de auditoría
# ==============================================================================

# Interfaces (para type hints)
from .interfaces import (
    IRecordRepository,
    ICatalog,
    IAuditRepository,
)

# Implementaciones concretas (memoria)
from .base import BaseRepository, ListRepository, LogRepository
from .product_repository import ProductRepository
from .order_repository import OrderRepository
from .catalog_repository import StaticCatalog
from .audit_repository import AuditRepository

__all__ = [
    # Interfaces
    'IRecordRepository',
    'ICatalog',
    'IAuditRepository',

    # Clases base
    'BaseRepository',
    'ListRepository',
    'LogRepository',

    # Implementaciones
    'ProductRepository',
    'OrderRepository',
    'StaticCatalog',
    'AuditRepository',
]
