# ==============================================================================
# CAPA DE MODELOS - Estructuras de datos del sistema
# ==============================================================================
# Este módulo define todas las entidades del dominio usando dataclasses.
#   - Productos y su borrador de formulario
#   - Pedidos, ítems de pedido y su borrador de formulario
#   - Entradas del catálogo y registros de auditoría
# Los estados son enums cerrados: un valor inválido falla al construir.
# ==============================================================================

from .entities import (
    # Productos
    Product,
    ProductDraft,
    ProductStatus,

    # Pedidos
    Order,
    OrderDraft,
    OrderStatus,
    LineItem,

    # Catálogo
    CatalogEntry,

    # Auditoría
    AuditLog,
    AuditType,

    # Reglas de cálculo y normalización
    calculate_total,
    format_money,
    parse_price,
    parse_quantity,
    parse_stock,
    today,
)

__all__ = [
    # Productos
    'Product',
    'ProductDraft',
    'ProductStatus',

    # Pedidos
    'Order',
    'OrderDraft',
    'OrderStatus',
    'LineItem',

    # Catálogo
    'CatalogEntry',

    # Auditoría
    'AuditLog',
    'AuditType',

    # Reglas
    'calculate_total',
    'format_money',
    'parse_price',
    'parse_quantity',
    'parse_stock',
    'today',
]
