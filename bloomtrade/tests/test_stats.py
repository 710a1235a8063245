# -*- coding: utf-8 -*-
"""
Tests de las estadísticas del panel
"""
import pytest

from bloomtrade.models import OrderDraft, OrderStatus
from bloomtrade.services import StatsService


@pytest.fixture
def stats(seeded_product_service, seeded_order_service):
    return StatsService(
        products_loader=seeded_product_service.get_all_products,
        orders_loader=seeded_order_service.get_all_orders,
    )


def test_dashboard_over_seed_data(stats):
    data = stats.compute_dashboard()
    assert data['total_products'] == 3
    assert data['active_products'] == 2
    assert data['out_of_stock_products'] == 1
    assert data['total_orders'] == 3
    assert data['unique_customers'] == 3
    assert data['revenue'] == pytest.approx(749.97 + 239.97 + 299.99)
    assert data['revenue_display'] == '1289.93'
    assert data['orders_by_status'] == {
        'pending': 0,
        'processing': 1,
        'shipped': 1,
        'delivered': 1,
        'cancelled': 0,
    }


def test_cancelled_orders_do_not_count_as_revenue(stats, seeded_order_service):
    draft = OrderDraft.from_order(seeded_order_service.get_order('1001'))
    draft.status = OrderStatus.CANCELLED
    seeded_order_service.update_order('1001', draft)

    assert stats.revenue() == pytest.approx(239.97 + 299.99)
    assert stats.compute_dashboard()['orders_by_status']['cancelled'] == 1


def test_stats_follow_live_data(stats, seeded_product_service, seeded_order_service):
    seeded_product_service.delete_product('3')
    seeded_order_service.delete_order('1003')
    data = stats.compute_dashboard()
    assert data['total_products'] == 2
    assert data['out_of_stock_products'] == 0
    assert data['unique_customers'] == 2


def test_unique_customers_ignore_email_case(seeded_order_service, stats):
    draft = OrderDraft.from_order(seeded_order_service.get_order('1002'))
    draft.customer_email = 'JOHN@example.com'
    seeded_order_service.create_order(draft)
    assert stats.unique_customers() == 3


def test_empty_stats_without_loaders():
    data = StatsService().compute_dashboard()
    assert data['total_products'] == 0
    assert data['revenue'] == 0
    assert data['revenue_display'] == '0.00'
