# ==============================================================================
# ENTIDADES DEL DOMINIO - Definiciones de dataclasses
# ==============================================================================
# Cada entidad representa un concepto del negocio (productos y pedidos).
# Todas viven en memoria: no hay persistencia, solo estructuras de datos.
# ==============================================================================

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Iterable
from enum import Enum
from datetime import date, datetime
import math


# ==============================================================================
# ENUMERACIONES - Estados y tipos válidos
# ==============================================================================

class ProductStatus(str, Enum):
    """Estados posibles de un producto."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class OrderStatus(str, Enum):
    """
    Estados posibles de un pedido.
    No hay transiciones restringidas: cualquier estado puede pasar a cualquier otro.
    """
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class AuditType(str, Enum):
    """Tipos de eventos de auditoría."""
    PRODUCTO = "PRODUCTO"
    PEDIDO = "PEDIDO"


# Niveles de stock usados por el listado de productos
STOCK_IN = 'in_stock'
STOCK_LOW = 'low_stock'
STOCK_OUT = 'out_of_stock'

# Por encima de este valor el stock se considera holgado
STOCK_LOW_THRESHOLD = 10


# ==============================================================================
# NORMALIZACIÓN DE ENTRADAS NUMÉRICAS
# ==============================================================================
# Política "clamp-to-default": una entrada inválida nunca se rechaza,
# se reemplaza por el valor por defecto del campo.

def _to_int(value: Any) -> Optional[int]:
    """Parte entera de un número o texto numérico ('2.5' y 2.5 dan 2); None si no es finito."""
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None


def parse_quantity(value: Any) -> int:
    """Cantidad de un ítem: entero >= 1, si no es válido retorna 1."""
    qty = _to_int(value)
    if qty is None or qty < 1:
        return 1
    return qty


def parse_price(value: Any) -> float:
    """Precio: decimal finito >= 0, si no es válido retorna 0."""
    try:
        price = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    # NaN e infinito no son precios
    if not math.isfinite(price) or price < 0:
        return 0.0
    return price


def parse_stock(value: Any) -> int:
    """Stock: entero >= 0, si no es válido retorna 0."""
    stock = _to_int(value)
    if stock is None:
        return 0
    return max(0, stock)


def calculate_total(items: Iterable['LineItem']) -> float:
    """
    Total de un pedido: suma de quantity * unit_price de cada ítem.

    Se usa tanto para el total en vivo del formulario como para el total
    guardado, así ambos coinciden exactamente. No se redondea.
    """
    return sum(item.quantity * item.unit_price for item in items)


def format_money(amount: float) -> str:
    """Formato de visualización (2 decimales)."""
    return f"{amount:.2f}"


def today() -> str:
    """Fecha actual en formato YYYY-MM-DD."""
    return date.today().isoformat()


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


# ==============================================================================
# CATÁLOGO
# ==============================================================================

@dataclass(frozen=True)
class CatalogEntry:
    """
    Entrada del catálogo usada al elegir un producto en un ítem de pedido.

    Attributes:
        id: ID del producto
        name: Nombre mostrado
        price: Precio unitario vigente
    """
    id: str
    name: str
    price: float

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name, 'price': self.price}


# ==============================================================================
# ENTIDADES DE PRODUCTO
# ==============================================================================

@dataclass
class Product:
    """
    Producto del catálogo administrado.

    Attributes:
        id: Identificador único (generado al crear)
        name: Nombre del producto
        description: Descripción libre
        price: Precio (>= 0)
        stock: Unidades disponibles (>= 0)
        category: Categoría para clasificación
        status: active / inactive
        created_at: Fecha de creación (YYYY-MM-DD)
    """
    id: str
    name: str
    description: str = ''
    price: float = 0.0
    stock: int = 0
    category: str = ''
    status: ProductStatus = ProductStatus.ACTIVE
    created_at: str = ''

    def __post_init__(self):
        # Un estado fuera del enum falla aquí con ValueError
        self.status = ProductStatus(self.status)
        if not self.created_at:
            self.created_at = today()

    @property
    def stock_level(self) -> str:
        """Clasificación del stock para el listado."""
        if self.stock > STOCK_LOW_THRESHOLD:
            return STOCK_IN
        if self.stock > 0:
            return STOCK_LOW
        return STOCK_OUT

    @property
    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario para la capa de presentación."""
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'price': self.price,
            'stock': self.stock,
            'stock_level': self.stock_level,
            'category': self.category,
            'status': self.status.value,
            'created_at': self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Product':
        """Crea instancia desde diccionario."""
        return cls(
            id=str(data.get('id', '')),
            name=data.get('name', ''),
            description=data.get('description', ''),
            price=parse_price(data.get('price', 0)),
            stock=parse_stock(data.get('stock', 0)),
            category=data.get('category', ''),
            status=data.get('status', ProductStatus.ACTIVE),
            created_at=data.get('created_at', ''),
        )


@dataclass
class ProductDraft:
    """
    Borrador editable de un producto (sin id ni fecha).
    Es lo que produce el formulario y consume ProductService.
    """
    name: str = ''
    description: str = ''
    price: float = 0.0
    stock: int = 0
    category: str = ''
    status: ProductStatus = ProductStatus.ACTIVE

    FIELDS = ('name', 'description', 'price', 'stock', 'category', 'status')

    def __post_init__(self):
        self.status = ProductStatus(self.status)

    def fields(self) -> Dict[str, Any]:
        """Campos editables, listos para fusionarse sobre un Product."""
        return {name: getattr(self, name) for name in self.FIELDS}

    def to_dict(self) -> Dict[str, Any]:
        d = self.fields()
        d['status'] = self.status.value
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProductDraft':
        return cls(
            name=data.get('name', ''),
            description=data.get('description', ''),
            price=parse_price(data.get('price', 0)),
            stock=parse_stock(data.get('stock', 0)),
            category=data.get('category', ''),
            status=data.get('status', ProductStatus.ACTIVE),
        )

    @classmethod
    def from_product(cls, product: Product) -> 'ProductDraft':
        """Borrador inicial en modo edición."""
        return cls(**{name: getattr(product, name) for name in cls.FIELDS})


# ==============================================================================
# ENTIDADES DE PEDIDO
# ==============================================================================

@dataclass
class LineItem:
    """
    Ítem individual dentro de un pedido.

    product_name y unit_price se copian del catálogo al elegir el producto
    y no se vuelven a sincronizar si el catálogo cambia después.

    Attributes:
        product_id: ID del producto referenciado
        product_name: Nombre capturado al seleccionar
        quantity: Cantidad (>= 1)
        unit_price: Precio unitario capturado al seleccionar
    """
    product_id: str = ''
    product_name: str = ''
    quantity: int = 1
    unit_price: float = 0.0

    def __post_init__(self):
        self.quantity = parse_quantity(self.quantity)
        self.unit_price = parse_price(self.unit_price)

    @property
    def line_total(self) -> float:
        """Subtotal de este ítem."""
        return self.quantity * self.unit_price

    def copy(self) -> 'LineItem':
        return LineItem(self.product_id, self.product_name, self.quantity, self.unit_price)

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario."""
        return {
            'product_id': self.product_id,
            'product_name': self.product_name,
            'quantity': self.quantity,
            'unit_price': self.unit_price,
            'line_total': self.line_total,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LineItem':
        """Crea instancia desde diccionario."""
        return cls(
            product_id=str(data.get('product_id', '') or ''),
            product_name=data.get('product_name', ''),
            quantity=data.get('quantity', 1),
            unit_price=data.get('unit_price', 0.0),
        )


@dataclass
class Order:
    """
    Representa un pedido completo.

    El total no es un campo: se deriva siempre de los ítems, por lo que
    nunca puede quedar desincronizado ni asignarse por separado.

    Attributes:
        id: Identificador único (generado al crear)
        customer_name: Nombre del cliente
        customer_email: Email del cliente
        items: Ítems del pedido (al menos uno)
        status: Estado actual
        created_at: Fecha de creación (YYYY-MM-DD)
        shipping_address: Dirección de envío (texto libre)
    """
    id: str
    customer_name: str
    customer_email: str = ''
    items: List[LineItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING
    created_at: str = ''
    shipping_address: str = ''

    def __post_init__(self):
        self.status = OrderStatus(self.status)
        if not self.created_at:
            self.created_at = today()

    @property
    def total(self) -> float:
        """Total del pedido (sin redondear)."""
        return calculate_total(self.items)

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario para la capa de presentación."""
        return {
            'id': self.id,
            'customer_name': self.customer_name,
            'customer_email': self.customer_email,
            'items': [item.to_dict() for item in self.items],
            'total': self.total,
            'total_display': format_money(self.total),
            'status': self.status.value,
            'created_at': self.created_at,
            'shipping_address': self.shipping_address,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Order':
        """
        Crea instancia desde diccionario.
        Un 'total' presente en los datos se ignora: siempre se recalcula.
        """
        items = [LineItem.from_dict(i) for i in data.get('items', [])]
        return cls(
            id=str(data.get('id', '')),
            customer_name=data.get('customer_name', ''),
            customer_email=data.get('customer_email', ''),
            items=items,
            status=data.get('status', OrderStatus.PENDING),
            created_at=data.get('created_at', ''),
            shipping_address=data.get('shipping_address', ''),
        )


@dataclass
class OrderDraft:
    """
    Borrador editable de un pedido (sin id, fecha ni total).
    En modo creación arranca con exactamente un ítem vacío.
    """
    customer_name: str = ''
    customer_email: str = ''
    shipping_address: str = ''
    status: OrderStatus = OrderStatus.PENDING
    items: List[LineItem] = field(default_factory=lambda: [LineItem()])

    FIELDS = ('customer_name', 'customer_email', 'shipping_address', 'status', 'items')

    def __post_init__(self):
        self.status = OrderStatus(self.status)

    @property
    def total(self) -> float:
        """Total en vivo del borrador (misma regla que Order.total)."""
        return calculate_total(self.items)

    def fields(self) -> Dict[str, Any]:
        """Campos editables; los ítems se copian para no compartir estado."""
        d = {name: getattr(self, name) for name in self.FIELDS}
        d['items'] = [item.copy() for item in self.items]
        return d

    def to_dict(self) -> Dict[str, Any]:
        return {
            'customer_name': self.customer_name,
            'customer_email': self.customer_email,
            'shipping_address': self.shipping_address,
            'status': self.status.value,
            'items': [item.to_dict() for item in self.items],
            'total': self.total,
            'total_display': format_money(self.total),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OrderDraft':
        items = [LineItem.from_dict(i) for i in data.get('items', [])]
        return cls(
            customer_name=data.get('customer_name', ''),
            customer_email=data.get('customer_email', ''),
            shipping_address=data.get('shipping_address', ''),
            status=data.get('status', OrderStatus.PENDING),
            items=items or [LineItem()],
        )

    @classmethod
    def from_order(cls, order: Order) -> 'OrderDraft':
        """Borrador inicial en modo edición."""
        return cls(
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            shipping_address=order.shipping_address,
            status=order.status,
            items=[item.copy() for item in order.items] or [LineItem()],
        )


# ==============================================================================
# ENTIDADES DE AUDITORÍA
# ==============================================================================

@dataclass
class AuditLog:
    """
    Registro de auditoría (en memoria).

    Attributes:
        type: Tipo de evento (PRODUCTO, PEDIDO)
        user: Usuario que realizó la acción
        message: Mensaje descriptivo humanizado
        timestamp: Fecha y hora del evento
        related_id: ID relacionado (producto o pedido)
        details: Detalles adicionales
    """
    type: str
    user: str
    message: str
    timestamp: str = ''
    related_id: str = ''
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.type = _enum_value(self.type)
        if not self.timestamp:
            self.timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario."""
        return {
            'type': self.type,
            'user': self.user,
            'message': self.message,
            'timestamp': self.timestamp,
            'related_id': self.related_id,
            'details': self.details
        }
