# ==============================================================================
# CAPA DE SERVICIOS - Lógica de negocio
# ==============================================================================
# Esta capa contiene TODA la lógica de negocio de la aplicación.
#
# PRINCIPIOS:
# 1. Los servicios orquestan operaciones sobre repositorios
# 2. Aplican las reglas (IDs únicos, totales derivados, no-op silencioso)
# 3. Las rutas (controllers) solo llaman a servicios
# 4. Los servicios NO conocen cómo se almacenan los datos
#
# ESTRUCTURA:
# ├── product_service.py → Productos (CRUD + búsqueda)
# ├── order_service.py   → Pedidos (CRUD + búsqueda + totales)
# ├── form_service.py    → Formularios de alta/edición (borradores)
# ├── filter_service.py  → Filtro de búsqueda por texto
# ├── audit_service.py   → Logs de actividad
# └── stats_service.py   → Estadísticas del panel
# ==============================================================================

from bloomtrade.services.audit_service import AuditService
from bloomtrade.services.filter_service import (
    ORDER_SEARCH_FIELDS,
    PRODUCT_SEARCH_FIELDS,
    filter_orders,
    filter_products,
    filter_records,
)
from bloomtrade.services.product_service import ProductService
from bloomtrade.services.order_service import OrderService
from bloomtrade.services.form_service import FormSession, ProductFormSession, OrderFormSession
from bloomtrade.services.stats_service import StatsService

__all__ = [
    'AuditService',
    'ORDER_SEARCH_FIELDS',
    'PRODUCT_SEARCH_FIELDS',
    'filter_orders',
    'filter_products',
    'filter_records',
    'ProductService',
    'OrderService',
    'FormSession',
    'ProductFormSession',
    'OrderFormSession',
    'StatsService',
]
