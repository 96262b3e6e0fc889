from pathlib import Path

import pytest


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        # Get the test file path relative to the tests directory
        test_path = Path(item.fspath)

        # Mark tests based on their directory
        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to reset adapter singletons and the shared service after every test"""
    yield

    from inventory.stock import reset_inventory
    from notifications.channel import reset_notifier
    from ordering.coupons import reset_discounts
    from ordering.domain import reset_order_service
    from payments.gateway import reset_gateway

    reset_inventory()
    reset_gateway()
    reset_notifier()
    reset_discounts()
    reset_order_service()
