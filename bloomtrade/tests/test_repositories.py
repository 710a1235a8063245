# -*- coding: utf-8 -*-
"""
Tests de repositorios en memoria y catálogo
"""
from bloomtrade.models import Product
from bloomtrade.repositories import (
    AuditRepository,
    IAuditRepository,
    ICatalog,
    IRecordRepository,
    OrderRepository,
    ProductRepository,
    StaticCatalog,
)


def test_seeded_repositories_keep_listing_order():
    assert ProductRepository(seed=True).ids() == ['1', '2', '3']
    assert OrderRepository(seed=True).ids() == ['1001', '1002', '1003']


def test_empty_repositories():
    assert ProductRepository().get_all() == []
    assert OrderRepository().next_id() == '1001'
    assert ProductRepository().next_id() == '1'


def test_next_id_continues_after_highest():
    assert ProductRepository(seed=True).next_id() == '4'
    assert OrderRepository(seed=True).next_id() == '1004'


def test_next_id_does_not_reuse_live_ids_after_delete():
    repo = OrderRepository(seed=True)
    repo.delete('1002')
    new_id = repo.next_id()
    assert new_id not in repo.ids()
    assert new_id == '1004'


def test_next_id_ignores_non_numeric_ids():
    repo = ProductRepository()
    repo.prepend(Product(id='abc', name='X'))
    repo.prepend(Product(id='7', name='Y'))
    assert repo.next_id() == '8'


def test_get_all_returns_a_copy():
    repo = ProductRepository(seed=True)
    products = repo.get_all()
    products.clear()
    assert repo.count() == 3


def test_prepend_replace_delete():
    repo = ProductRepository(seed=True)
    repo.prepend(Product(id='4', name='New'))
    assert repo.ids()[0] == '4'

    assert repo.replace('2', Product(id='2', name='Changed')) is True
    assert repo.ids() == ['4', '1', '2', '3']
    assert repo.get_by_id('2').name == 'Changed'

    assert repo.replace('99', Product(id='99', name='Ghost')) is False
    assert repo.delete('99') is None
    assert repo.delete('1').id == '1'
    assert repo.ids() == ['4', '2', '3']


def test_order_repository_queries():
    repo = OrderRepository(seed=True)
    assert [o.id for o in repo.get_by_status('shipped')] == ['1002']
    assert [o.id for o in repo.get_by_customer_email('JANE@example.com ')] == ['1002']


def test_repositories_satisfy_interfaces():
    assert isinstance(ProductRepository(), IRecordRepository)
    assert isinstance(OrderRepository(), IRecordRepository)
    assert isinstance(StaticCatalog(), ICatalog)
    assert isinstance(AuditRepository(), IAuditRepository)


def test_static_catalog_lookup():
    catalog = StaticCatalog()
    assert len(catalog) == 3
    entry = catalog.lookup_product('3')
    assert (entry.name, entry.price) == ('Basic Package', 79.99)
    assert catalog.lookup_product('42') is None


def test_static_catalog_custom_entries():
    catalog = StaticCatalog([{'id': 7, 'name': 'Gadget', 'price': 'bad'}])
    entry = catalog.lookup_product('7')
    assert entry.name == 'Gadget'
    assert entry.price == 0.0


def test_audit_repository_is_newest_first_and_capped():
    repo = AuditRepository()
    repo.MAX_LOGS = 3
    for i in range(5):
        repo.log('PEDIDO', None, f'evento {i}', str(i))
    logs = repo.load()
    assert [l['related_id'] for l in logs] == ['4', '3', '2']
    assert logs[0]['user'] == 'sistema'


def test_audit_repository_search():
    repo = AuditRepository()
    repo.log('PRODUCTO', 'ana', "Producto 'Lamp' creado", '4')
    repo.log('PEDIDO', 'luis', 'Pedido 1004 creado', '1004')
    assert len(repo.search('lamp')) == 1
    assert len(repo.search('LUIS')) == 1
    assert len(repo.search('', 'PEDIDO')) == 1
    assert repo.search('nada') == []
