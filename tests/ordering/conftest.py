from unittest.mock import MagicMock

import pytest
from inventory.stock.port import InventoryPort
from notifications.channel.port import NotificationPort
from ordering.coupons.port import DiscountPort
from ordering.order.service import OrderService
from payments.gateway.port import PaymentGateway


@pytest.fixture()
def inventory():
    mock = MagicMock(spec=InventoryPort)
    mock.check_stock.return_value = True
    mock.reserve_stock.return_value = True
    return mock


@pytest.fixture()
def payments():
    mock = MagicMock(spec=PaymentGateway)
    mock.process_payment.return_value = True
    mock.needs_manual_approval.return_value = False
    return mock


@pytest.fixture()
def notifications():
    return MagicMock(spec=NotificationPort)


@pytest.fixture()
def discounts():
    return MagicMock(spec=DiscountPort)


@pytest.fixture()
def service(inventory, payments, notifications, discounts):
    return OrderService(
        inventory=inventory,
        payments=payments,
        notifications=notifications,
        discounts=discounts,
    )
