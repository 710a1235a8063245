# ==============================================================================
# SESIONES DE FORMULARIO
# ==============================================================================
# Un formulario mantiene un borrador mutable de un producto o pedido:
#   - Modo creación: borrador con valores por defecto
#   - Modo edición: borrador copiado de un registro existente
# Al confirmar (submit) el borrador pasa al servicio (create/update) y la
# sesión queda cerrada. No hay deshacer.
#
# Cada setter reemplaza exactamente el campo indicado. Las entradas
# numéricas inválidas caen al valor por defecto (cantidad 1, precio 0).
# ==============================================================================

from typing import Any, Callable, Dict, Optional

from bloomtrade.models import (
    LineItem,
    Order,
    OrderDraft,
    OrderStatus,
    Product,
    ProductDraft,
    ProductStatus,
    parse_price,
    parse_quantity,
    parse_stock,
)
from bloomtrade.repositories.interfaces import ICatalog


def _as_text(value: Any) -> str:
    return '' if value is None else str(value)


class FormSession:
    """
    Base común de los formularios.

    Attributes:
        record_id: ID del registro en edición (None en modo creación)
        closed: True una vez confirmado el formulario
    """

    # {campo: función que normaliza el valor}
    FIELD_SETTERS: Dict[str, Callable[[Any], Any]] = {}

    def __init__(self, draft, record_id: Optional[str] = None):
        self.draft = draft
        self.record_id = record_id
        self.closed = False

    @property
    def is_edit(self) -> bool:
        return self.record_id is not None

    def set_field(self, field: str, value: Any) -> bool:
        """
        Reemplaza un campo del borrador.

        Args:
            field: Nombre del campo editable
            value: Nuevo valor (se normaliza según el campo)

        Returns:
            False si el campo no es editable con un setter

        Raises:
            ValueError: Si el campo es 'status' y el valor no es un estado válido
        """
        normalize = self.FIELD_SETTERS.get(field)
        if normalize is None:
            return False
        setattr(self.draft, field, normalize(value))
        return True

    def submit(self, service, user: str = None):
        """
        Confirma el formulario: crea o actualiza el registro y cierra la sesión.

        Args:
            service: ProductService u OrderService según el formulario
            user: Usuario que confirma (para auditoría)

        Returns:
            El registro creado/actualizado, o None si la sesión ya estaba
            cerrada o el registro en edición ya no existe
        """
        if self.closed:
            return None
        self.closed = True
        if self.is_edit:
            return self._update(service, user)
        return self._create(service, user)

    def _create(self, service, user):
        raise NotImplementedError

    def _update(self, service, user):
        raise NotImplementedError


# ==============================================================================
# FORMULARIO DE PRODUCTO
# ==============================================================================

class ProductFormSession(FormSession):
    """Formulario de alta/edición de productos."""

    FIELD_SETTERS = {
        'name': _as_text,
        'description': _as_text,
        'category': _as_text,
        'price': parse_price,
        'stock': parse_stock,
        'status': ProductStatus,
    }

    @classmethod
    def for_create(cls) -> 'ProductFormSession':
        """Borrador vacío con estado 'active'."""
        return cls(ProductDraft())

    @classmethod
    def for_edit(cls, product: Product) -> 'ProductFormSession':
        """Borrador copiado del producto."""
        return cls(ProductDraft.from_product(product), record_id=product.id)

    def _create(self, service, user):
        return service.create_product(self.draft, user)

    def _update(self, service, user):
        return service.update_product(self.record_id, self.draft, user)

    def to_dict(self) -> Dict[str, Any]:
        """Estado serializable (para guardar en la sesión Flask)."""
        return {
            'record_id': self.record_id,
            'draft': self.draft.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProductFormSession':
        return cls(ProductDraft.from_dict(data.get('draft', {})), data.get('record_id'))


# ==============================================================================
# FORMULARIO DE PEDIDO
# ==============================================================================

class OrderFormSession(FormSession):
    """
    Formulario de alta/edición de pedidos.

    Además de los setters de campos, maneja la lista de ítems:
    agregar, quitar (nunca por debajo de uno) y editar. Elegir un producto
    en un ítem copia nombre y precio desde el catálogo.
    """

    FIELD_SETTERS = {
        'customer_name': _as_text,
        'customer_email': _as_text,
        'shipping_address': _as_text,
        'status': OrderStatus,
    }

    ITEM_SETTERS = {
        'product_name': _as_text,
        'quantity': parse_quantity,
        'unit_price': parse_price,
    }

    def __init__(
        self,
        catalog: ICatalog,
        draft: OrderDraft = None,
        record_id: Optional[str] = None
    ):
        """
        Args:
            catalog: Catálogo para capturar nombre/precio al elegir producto
            draft: Borrador inicial (por defecto uno vacío con un ítem)
            record_id: ID del pedido en edición
        """
        super().__init__(draft if draft is not None else OrderDraft(), record_id)
        self.catalog = catalog

    @classmethod
    def for_create(cls, catalog: ICatalog) -> 'OrderFormSession':
        """Borrador vacío: estado 'pending' y un ítem vacío."""
        return cls(catalog)

    @classmethod
    def for_edit(cls, order: Order, catalog: ICatalog) -> 'OrderFormSession':
        """Borrador copiado del pedido (los ítems son copias)."""
        return cls(catalog, OrderDraft.from_order(order), record_id=order.id)

    @property
    def items(self):
        return self.draft.items

    @property
    def total(self) -> float:
        """Total en vivo del borrador."""
        return self.draft.total

    # =========================================================================
    # ÍTEMS
    # =========================================================================

    def add_item(self) -> LineItem:
        """Agrega un ítem vacío (sin producto, cantidad 1, precio 0)."""
        item = LineItem()
        self.draft.items.append(item)
        return item

    def remove_item(self, index: int) -> bool:
        """
        Quita el ítem en la posición indicada.
        Un pedido conserva siempre al menos un ítem.

        Returns:
            True si se quitó
        """
        if len(self.draft.items) <= 1:
            return False
        if not 0 <= index < len(self.draft.items):
            return False
        del self.draft.items[index]
        return True

    def update_item(self, index: int, field: str, value: Any) -> bool:
        """
        Cambia un campo de un ítem.

        Si el campo es 'product_id' se consulta el catálogo y se
        sobrescriben product_name y unit_price con los de la entrada
        (vacío / 0 si no existe), descartando cualquier valor manual previo.

        Returns:
            True si se aplicó; False si el índice o el campo no son válidos
        """
        if not 0 <= index < len(self.draft.items):
            return False
        item = self.draft.items[index]

        if field == 'product_id':
            product_id = _as_text(value)
            entry = self.catalog.lookup_product(product_id)
            item.product_id = product_id
            item.product_name = entry.name if entry else ''
            item.unit_price = entry.price if entry else 0.0
            return True

        normalize = self.ITEM_SETTERS.get(field)
        if normalize is None:
            return False
        setattr(item, field, normalize(value))
        return True

    # =========================================================================
    # CONFIRMACIÓN Y SERIALIZACIÓN
    # =========================================================================

    def _create(self, service, user):
        return service.create_order(self.draft, user)

    def _update(self, service, user):
        return service.update_order(self.record_id, self.draft, user)

    def to_dict(self) -> Dict[str, Any]:
        """Estado serializable (para guardar en la sesión Flask)."""
        return {
            'record_id': self.record_id,
            'draft': self.draft.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], catalog: ICatalog) -> 'OrderFormSession':
        return cls(catalog, OrderDraft.from_dict(data.get('draft', {})), data.get('record_id'))
