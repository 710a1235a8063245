# -*- coding: utf-8 -*-
"""
Tests de entidades: totales, normalización numérica y estados
"""
import pytest

from bloomtrade.models import (
    LineItem,
    Order,
    OrderDraft,
    OrderStatus,
    Product,
    ProductDraft,
    ProductStatus,
    calculate_total,
    format_money,
    parse_price,
    parse_quantity,
    parse_stock,
    today,
)


def test_calculate_total_sums_quantity_times_price():
    items = [
        LineItem('1', 'Premium Widget', 2, 299.99),
        LineItem('2', 'Standard Tool', 1, 149.99),
    ]
    assert calculate_total(items) == pytest.approx(749.97)
    assert format_money(calculate_total(items)) == '749.97'


def test_calculate_total_of_no_items_is_zero():
    assert calculate_total([]) == 0


def test_order_total_is_derived_from_items():
    order = Order.from_dict({
        'id': '1',
        'customer_name': 'John Doe',
        'items': [{'product_id': '3', 'product_name': 'Basic Package', 'quantity': 3, 'unit_price': 79.99}],
        'total': 1.0,
    })
    assert order.total == 3 * 79.99

    order.items.append(LineItem('1', 'Premium Widget', 1, 299.99))
    assert order.total == 3 * 79.99 + 299.99


def test_order_total_cannot_be_assigned():
    order = Order(id='1', customer_name='John Doe', items=[LineItem('1', 'X', 1, 5.0)])
    with pytest.raises(AttributeError):
        order.total = 10.0


@pytest.mark.parametrize('raw, expected', [
    ('3', 3), (2, 2), ('abc', 1), ('', 1), (None, 1), (0, 1), (-4, 1),
    ('2.5', 2), (2.5, 2), (float('inf'), 1), ('1e999', 1), (float('nan'), 1),
])
def test_parse_quantity_clamps_to_one(raw, expected):
    assert parse_quantity(raw) == expected


@pytest.mark.parametrize('raw, expected', [
    ('79.99', 79.99), (0, 0.0), ('abc', 0.0), (None, 0.0), ('-5', 0.0), ('nan', 0.0),
    ('inf', 0.0), (float('-inf'), 0.0), (10 ** 400, 0.0),
])
def test_parse_price_clamps_to_zero(raw, expected):
    assert parse_price(raw) == expected


def test_parse_stock_never_negative():
    assert parse_stock('12') == 12
    assert parse_stock('12.9') == 12
    assert parse_stock('x') == 0
    assert parse_stock(-3) == 0
    assert parse_stock(float('inf')) == 0


def test_line_item_normalizes_on_construction():
    item = LineItem(quantity=0, unit_price=-1)
    assert item.quantity == 1
    assert item.unit_price == 0.0
    assert item.line_total == 0.0


def test_invalid_status_fails_at_construction():
    with pytest.raises(ValueError):
        Product(id='1', name='X', status='archived')
    with pytest.raises(ValueError):
        Order(id='1', customer_name='X', status='lost')
    with pytest.raises(ValueError):
        OrderDraft(status='returned')


def test_status_strings_are_coerced_to_enums():
    product = Product(id='1', name='X', status='inactive')
    assert product.status is ProductStatus.INACTIVE
    order = Order(id='1', customer_name='X', status='shipped')
    assert order.status is OrderStatus.SHIPPED
    assert order.to_dict()['status'] == 'shipped'


def test_created_at_defaults_to_today():
    assert Product(id='1', name='X').created_at == today()


@pytest.mark.parametrize('stock, level', [
    (45, 'in_stock'), (11, 'in_stock'), (10, 'low_stock'), (1, 'low_stock'), (0, 'out_of_stock'),
])
def test_product_stock_level(stock, level):
    assert Product(id='1', name='X', stock=stock).stock_level == level


def test_order_draft_defaults():
    draft = OrderDraft()
    assert draft.status is OrderStatus.PENDING
    assert len(draft.items) == 1
    item = draft.items[0]
    assert (item.product_id, item.product_name, item.quantity, item.unit_price) == ('', '', 1, 0.0)


def test_order_draft_from_order_copies_items():
    order = Order(id='1', customer_name='X', items=[LineItem('1', 'A', 2, 3.0)])
    draft = OrderDraft.from_order(order)
    draft.items[0].quantity = 5
    assert order.items[0].quantity == 2


def test_product_draft_defaults_and_round_trip_from_product():
    assert ProductDraft().status is ProductStatus.ACTIVE
    product = Product(id='9', name='Lamp', price=10.5, stock=3, category='Home')
    draft = ProductDraft.from_product(product)
    assert draft.fields() == {
        'name': 'Lamp',
        'description': '',
        'price': 10.5,
        'stock': 3,
        'category': 'Home',
        'status': ProductStatus.ACTIVE,
    }
