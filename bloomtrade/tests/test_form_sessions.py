# -*- coding: utf-8 -*-
"""
Tests de formularios: borradores, ítems, captura desde catálogo y confirmación
"""
import pytest

from bloomtrade.models import OrderStatus, ProductStatus, calculate_total
from bloomtrade.services import OrderFormSession, ProductFormSession


def fill_two_items(form):
    form.update_item(0, 'product_id', '1')
    form.update_item(0, 'quantity', 2)
    form.add_item()
    form.update_item(1, 'product_id', '2')


# ==============================================================================
# FORMULARIO DE PEDIDO
# ==============================================================================

def test_create_form_starts_with_one_empty_item(catalog):
    form = OrderFormSession.for_create(catalog)
    assert not form.is_edit
    assert form.draft.status is OrderStatus.PENDING
    assert len(form.items) == 1
    assert form.items[0].to_dict() == {
        'product_id': '', 'product_name': '', 'quantity': 1, 'unit_price': 0.0, 'line_total': 0.0,
    }
    assert form.total == 0


def test_product_selection_captures_name_and_price(catalog):
    form = OrderFormSession.for_create(catalog)
    fill_two_items(form)
    assert form.total == pytest.approx(749.97)

    form.update_item(1, 'product_id', '3')
    item = form.items[1]
    assert (item.product_name, item.unit_price) == ('Basic Package', 79.99)
    assert form.total == pytest.approx(679.97)


def test_product_selection_discards_manual_overrides(catalog):
    form = OrderFormSession.for_create(catalog)
    form.update_item(0, 'product_name', 'Custom name')
    form.update_item(0, 'unit_price', '1.50')
    assert form.total == 1.5

    form.update_item(0, 'product_id', '2')
    assert form.items[0].product_name == 'Standard Tool'
    assert form.items[0].unit_price == 149.99


def test_unknown_product_clears_name_and_price(catalog):
    form = OrderFormSession.for_create(catalog)
    form.update_item(0, 'product_id', '1')
    form.update_item(0, 'product_id', '77')
    item = form.items[0]
    assert (item.product_id, item.product_name, item.unit_price) == ('77', '', 0.0)


def test_invalid_numbers_fall_back_to_defaults(catalog):
    form = OrderFormSession.for_create(catalog)
    form.update_item(0, 'product_id', '1')
    form.update_item(0, 'quantity', 'abc')
    form.update_item(0, 'unit_price', 'xyz')
    assert form.items[0].quantity == 1
    assert form.items[0].unit_price == 0.0


def test_remove_item_never_drops_below_one(catalog):
    form = OrderFormSession.for_create(catalog)
    assert form.remove_item(0) is False
    assert len(form.items) == 1

    form.add_item()
    form.add_item()
    assert form.remove_item(5) is False
    assert form.remove_item(1) is True
    assert form.remove_item(0) is True
    assert form.remove_item(0) is False
    assert len(form.items) == 1


def test_update_item_out_of_range_or_unknown_field(catalog):
    form = OrderFormSession.for_create(catalog)
    assert form.update_item(3, 'quantity', 2) is False
    assert form.update_item(-1, 'quantity', 2) is False
    assert form.update_item(0, 'line_total', 99) is False
    assert form.items[0].quantity == 1


def test_live_total_matches_committed_total_exactly(catalog, order_service):
    form = OrderFormSession.for_create(catalog)
    fill_two_items(form)
    form.add_item()
    form.update_item(2, 'product_id', '3')
    form.update_item(2, 'quantity', 7)
    live = form.total

    order = form.submit(order_service)
    assert order.total == live
    assert order.total == calculate_total(order.items)


def test_total_tracks_every_item_mutation(catalog):
    form = OrderFormSession.for_create(catalog)
    steps = [
        lambda: form.update_item(0, 'product_id', '1'),
        lambda: form.add_item(),
        lambda: form.update_item(1, 'product_id', '3'),
        lambda: form.update_item(1, 'quantity', 4),
        lambda: form.remove_item(0),
        lambda: form.update_item(0, 'unit_price', 10),
    ]
    for step in steps:
        step()
        assert form.total == sum(i.quantity * i.unit_price for i in form.items)


def test_field_setters_replace_only_named_field(catalog):
    form = OrderFormSession.for_create(catalog)
    form.set_field('customer_name', 'Ana')
    form.set_field('customer_email', 'ana@example.com')
    assert form.set_field('status', 'delivered') is True
    assert form.draft.customer_name == 'Ana'
    assert form.draft.customer_email == 'ana@example.com'
    assert form.draft.shipping_address == ''
    assert form.draft.status is OrderStatus.DELIVERED


def test_field_setter_rejects_unknown_field_and_bad_status(catalog):
    form = OrderFormSession.for_create(catalog)
    assert form.set_field('total', 5) is False
    assert form.set_field('items', []) is False
    with pytest.raises(ValueError):
        form.set_field('status', 'lost')
    assert form.draft.status is OrderStatus.PENDING


def test_edit_form_updates_existing_order(catalog, seeded_order_service):
    order = seeded_order_service.get_order('1001')
    form = OrderFormSession.for_edit(order, catalog)
    assert form.is_edit
    assert form.total == order.total

    form.update_item(1, 'product_id', '3')
    # El pedido guardado no cambia hasta confirmar
    assert seeded_order_service.get_order('1001').total == pytest.approx(749.97)

    updated = form.submit(seeded_order_service)
    assert updated.id == '1001'
    assert updated.total == pytest.approx(679.97)
    assert updated.items[1].product_name == 'Basic Package'


def test_submit_closes_the_session(catalog, order_service):
    form = OrderFormSession.for_create(catalog)
    assert form.submit(order_service) is not None
    assert form.closed
    assert form.submit(order_service) is None
    assert len(order_service.get_all_orders()) == 1


def test_order_form_serialization_keeps_state(catalog):
    form = OrderFormSession.for_create(catalog)
    fill_two_items(form)
    form.set_field('customer_name', 'Jane Smith')

    restored = OrderFormSession.from_dict(form.to_dict(), catalog)
    assert restored.record_id is None
    assert restored.draft.customer_name == 'Jane Smith'
    assert [i.product_id for i in restored.items] == ['1', '2']
    assert restored.total == form.total


# ==============================================================================
# FORMULARIO DE PRODUCTO
# ==============================================================================

def test_product_form_defaults_and_setters(product_service):
    form = ProductFormSession.for_create()
    assert form.draft.status is ProductStatus.ACTIVE

    form.set_field('name', 'Basic Package')
    form.set_field('price', '79.99')
    form.set_field('stock', 'n/a')
    form.set_field('category', 'Starter')
    form.set_field('status', 'inactive')

    product = form.submit(product_service)
    assert product.to_dict()['price'] == 79.99
    assert product.stock == 0
    assert product.status is ProductStatus.INACTIVE
    assert product_service.get_all_products() == [product]


def test_product_form_invalid_price_falls_back_to_zero():
    form = ProductFormSession.for_create()
    form.set_field('price', 'gratis')
    assert form.draft.price == 0.0


def test_product_form_edit_keeps_identity(seeded_product_service):
    product = seeded_product_service.get_product('3')
    form = ProductFormSession.for_edit(product)
    form.set_field('stock', 12)
    updated = form.submit(seeded_product_service)
    assert (updated.id, updated.created_at, updated.stock) == ('3', '2024-01-10', 12)


def test_product_form_edit_of_deleted_product_is_a_no_op(seeded_product_service):
    form = ProductFormSession.for_edit(seeded_product_service.get_product('1'))
    seeded_product_service.delete_product('1')
    assert form.submit(seeded_product_service) is None
    assert [p.id for p in seeded_product_service.get_all_products()] == ['2', '3']


def test_non_finite_item_values_fall_back_to_defaults(catalog):
    form = OrderFormSession.for_create(catalog)
    assert form.update_item(0, 'quantity', float('inf')) is True
    form.update_item(0, 'unit_price', 'inf')
    assert (form.items[0].quantity, form.items[0].unit_price) == (1, 0.0)
    assert form.total == 0
