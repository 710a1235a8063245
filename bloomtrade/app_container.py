# ==============================================================================
# CONTENEDOR DE DEPENDENCIAS - Inyección de servicios
# ==============================================================================
# Este módulo proporciona una forma centralizada de obtener instancias
# de repositorios y servicios. Facilita:
#   - Inyección de dependencias
#   - Testing (se pueden reemplazar repositorios y catálogo)
#   - Cambiar el almacenamiento en memoria por un backend real sin tocar
#     servicios ni rutas
#
# Para conectar un backend real:
# 1. Crear repositorios que implementen IRecordRepository / ICatalog
# 2. Instanciarlos en las propiedades de este archivo
# 3. Los servicios NO requieren cambios
# ==============================================================================

from typing import Optional

from bloomtrade.repositories import (
    AuditRepository,
    ICatalog,
    OrderRepository,
    ProductRepository,
    StaticCatalog,
)
from bloomtrade.services import (
    AuditService,
    OrderService,
    ProductService,
    StatsService,
)


class AppContainer:
    """
    Contenedor de dependencias de la aplicación.

    Implementa el patrón Singleton para asegurar una única instancia
    de cada repositorio y servicio por proceso.

    Uso:
        container = AppContainer(seed=True)
        product_service = container.product_service
        order_service = container.order_service
    """

    _instance: Optional['AppContainer'] = None

    def __new__(cls, seed: bool = True, catalog: ICatalog = None):
        """Singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, seed: bool = True, catalog: ICatalog = None):
        """
        Inicializa el contenedor.

        Args:
            seed: Cargar datos de demostración en los repositorios
            catalog: Catálogo del selector de productos (por defecto la tabla fija)
        """
        if self._initialized:
            return

        self._seed = seed
        self._catalog_override = catalog

        # Repositorios (lazy loading)
        self._product_repo: Optional[ProductRepository] = None
        self._order_repo: Optional[OrderRepository] = None
        self._audit_repo: Optional[AuditRepository] = None
        self._catalog: Optional[ICatalog] = None

        # Servicios (lazy loading)
        self._audit_service: Optional[AuditService] = None
        self._product_service: Optional[ProductService] = None
        self._order_service: Optional[OrderService] = None
        self._stats_service: Optional[StatsService] = None

        self._initialized = True

    # =========================================================================
    # REPOSITORIOS
    # =========================================================================

    @property
    def product_repo(self) -> ProductRepository:
        """Repositorio de productos (singleton)."""
        if self._product_repo is None:
            self._product_repo = ProductRepository(seed=self._seed)
        return self._product_repo

    @property
    def order_repo(self) -> OrderRepository:
        """Repositorio de pedidos (singleton)."""
        if self._order_repo is None:
            self._order_repo = OrderRepository(seed=self._seed)
        return self._order_repo

    @property
    def audit_repo(self) -> AuditRepository:
        """Repositorio de auditoría (singleton)."""
        if self._audit_repo is None:
            self._audit_repo = AuditRepository()
        return self._audit_repo

    @property
    def catalog(self) -> ICatalog:
        """Catálogo del selector de productos (singleton)."""
        if self._catalog is None:
            self._catalog = self._catalog_override or StaticCatalog()
        return self._catalog

    # =========================================================================
    # SERVICIOS
    # =========================================================================

    @property
    def audit_service(self) -> AuditService:
        """Servicio de auditoría (singleton)."""
        if self._audit_service is None:
            self._audit_service = AuditService(self.audit_repo)
        return self._audit_service

    @property
    def product_service(self) -> ProductService:
        """Servicio de productos (singleton)."""
        if self._product_service is None:
            self._product_service = ProductService(
                self.product_repo,
                self.audit_service
            )
        return self._product_service

    @property
    def order_service(self) -> OrderService:
        """Servicio de pedidos (singleton)."""
        if self._order_service is None:
            self._order_service = OrderService(
                self.order_repo,
                self.audit_service
            )
        return self._order_service

    @property
    def stats_service(self) -> StatsService:
        """Servicio de estadísticas (singleton)."""
        if self._stats_service is None:
            self._stats_service = StatsService(
                products_loader=self.product_repo.get_all,
                orders_loader=self.order_repo.get_all
            )
        return self._stats_service

    # =========================================================================
    # UTILIDADES
    # =========================================================================

    def reset(self) -> None:
        """
        Reinicia todas las instancias.
        Los datos en memoria se pierden y se vuelven a sembrar.
        """
        self._product_repo = None
        self._order_repo = None
        self._audit_repo = None
        self._catalog = None

        self._audit_service = None
        self._product_service = None
        self._order_service = None
        self._stats_service = None

    @classmethod
    def get_instance(cls, seed: bool = True, catalog: ICatalog = None) -> 'AppContainer':
        """
        Obtiene la instancia singleton del contenedor.

        Args:
            seed: Cargar datos de demostración (solo se usa en primera llamada)
            catalog: Catálogo a usar (solo se usa en primera llamada)

        Returns:
            Instancia del contenedor
        """
        if cls._instance is None:
            return cls(seed, catalog)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Elimina la instancia singleton (útil para tests)."""
        if cls._instance is not None:
            cls._instance.reset()
            cls._instance = None


def get_container(seed: bool = True, catalog: ICatalog = None) -> AppContainer:
    """
    Obtiene el contenedor de dependencias global.

    Args:
        seed: Cargar datos de demostración
        catalog: Catálogo a usar

    Returns:
        Instancia del contenedor
    """
    return AppContainer.get_instance(seed, catalog)
