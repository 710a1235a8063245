# -*- coding: utf-8 -*-
"""
Configuración común de los tests
"""
import os
import sys
import tempfile

import pytest

# Asegurar que el proyecto esté en el path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

# Los logs de rendimiento de los tests no ensucian el paquete
os.environ.setdefault('BLOOMTRADE_LOGS_DIR', tempfile.mkdtemp(prefix='bloomtrade-logs-'))

from bloomtrade.repositories import AuditRepository, OrderRepository, ProductRepository, StaticCatalog
from bloomtrade.services import AuditService, OrderService, ProductService


@pytest.fixture
def catalog():
    return StaticCatalog()


@pytest.fixture
def audit_service():
    return AuditService(AuditRepository())


@pytest.fixture
def product_service(audit_service):
    return ProductService(ProductRepository(), audit_service)


@pytest.fixture
def seeded_product_service(audit_service):
    return ProductService(ProductRepository(seed=True), audit_service)


@pytest.fixture
def order_service(audit_service):
    return OrderService(OrderRepository(), audit_service)


@pytest.fixture
def seeded_order_service(audit_service):
    return OrderService(OrderRepository(seed=True), audit_service)
