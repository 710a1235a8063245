# ==============================================================================
# SERVICIO DE PRODUCTOS
# ==============================================================================
# Centraliza la lógica de negocio de productos: alta, edición, baja y
# búsqueda sobre el repositorio en memoria.
#
# Contrato permisivo: editar o eliminar un ID inexistente no lanza error,
# simplemente no hace nada (se retorna None para que el llamador lo sepa).
# ==============================================================================

from dataclasses import replace
from typing import Any, Dict, List, Optional

from bloomtrade.models import Product, ProductDraft, today
from bloomtrade.performance_logger import profile_function
from bloomtrade.repositories.interfaces import IRecordRepository
from bloomtrade.services.audit_service import AuditService
from bloomtrade.services.filter_service import filter_products


class ProductService:
    """
    Servicio para gestión de productos.

    Responsabilidades:
    - CRUD de productos
    - Generación de IDs únicos
    - Búsqueda por texto libre
    """

    def __init__(
        self,
        product_repo: IRecordRepository,
        audit_service: AuditService = None
    ):
        """
        Inicializa el servicio de productos.

        Args:
            product_repo: Repositorio de productos
            audit_service: Servicio de auditoría (opcional)
        """
        self.product_repo = product_repo
        self.audit_service = audit_service

    # =========================================================================
    # CONSULTAS
    # =========================================================================

    def get_all_products(self) -> List[Product]:
        """Todos los productos, más recientes primero."""
        return self.product_repo.get_all()

    def get_product(self, pid: str) -> Optional[Product]:
        """Obtiene un producto por su ID."""
        return self.product_repo.get_by_id(pid)

    def search_products(self, query: str = '') -> List[Product]:
        """
        Busca productos por nombre, descripción o categoría.

        Args:
            query: Texto a buscar (vacío = todos)

        Returns:
            Productos que coinciden, en orden de listado
        """
        return filter_products(self.product_repo.get_all(), query)

    # =========================================================================
    # OPERACIONES DE PRODUCTOS
    # =========================================================================

    @profile_function(name="Crear producto")
    def create_product(self, draft: ProductDraft, user: str = None) -> Product:
        """
        Crea un producto a partir de un borrador.

        El borrador se asume válido: la única validación de campos
        obligatorios ocurre en el formulario.

        Args:
            draft: Campos editables del producto
            user: Usuario que crea (para auditoría)

        Returns:
            El producto creado (ya insertado al inicio del listado)
        """
        product = Product(
            id=self.product_repo.next_id(),
            created_at=today(),
            **draft.fields()
        )
        self.product_repo.prepend(product)

        if self.audit_service:
            self.audit_service.log_product_created(user, product.id, product.name)

        return product

    @profile_function(name="Editar producto")
    def update_product(
        self,
        pid: str,
        draft: ProductDraft,
        user: str = None
    ) -> Optional[Product]:
        """
        Actualiza un producto con los campos del borrador.
        Conserva el ID y la fecha de creación.

        Args:
            pid: ID del producto
            draft: Nuevos valores de los campos editables
            user: Usuario que actualiza (para auditoría)

        Returns:
            El producto actualizado, o None si el ID no existe
        """
        existing = self.product_repo.get_by_id(pid)
        if existing is None:
            return None

        updated = replace(existing, **draft.fields())
        self.product_repo.replace(pid, updated)

        if self.audit_service:
            self.audit_service.log_product_updated(
                user, pid, updated.name, self._diff(existing, updated)
            )

        return updated

    @profile_function(name="Eliminar producto")
    def delete_product(self, pid: str, user: str = None) -> Optional[Product]:
        """
        Elimina un producto (sin papelera ni historial).

        Args:
            pid: ID del producto
            user: Usuario que elimina (para auditoría)

        Returns:
            El producto eliminado o None si no existía
        """
        removed = self.product_repo.delete(pid)

        if removed is not None and self.audit_service:
            self.audit_service.log_product_deleted(user, pid, removed.name)

        return removed

    @staticmethod
    def _diff(before: Product, after: Product) -> Dict[str, Dict[str, Any]]:
        changes = {}
        for name in ProductDraft.FIELDS:
            old, new = getattr(before, name), getattr(after, name)
            if old != new:
                changes[name] = {
                    'from': getattr(old, 'value', old),
                    'to': getattr(new, 'value', new),
                }
        return changes
