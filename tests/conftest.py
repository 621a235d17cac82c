"""
Shared fixtures for the earnings tests.

Rates assumed by the expected values (config.RATES):
    flash      1.50 normal / 2.00 express
    interlog   1.50 normal / 2.00 express
    ecommerce  1.00 normal / 1.00 express
"""

from datetime import date

import pytest


@pytest.fixture
def current_entry():
    return {
        "flash": {"normal": 10, "express": 2},
        "interlog": {"normal": 4, "express": 1},
        "ecommerce": {"normal": 3, "express": 0},
    }


@pytest.fixture
def legacy_express_entry():
    return {"flash": 5, "interlog": 3, "ecommerce": 0, "isExpress": True}


@pytest.fixture
def legacy_normal_entry():
    return {"flash": 5, "interlog": 3, "ecommerce": 2, "isExpress": False}


@pytest.fixture
def march_data():
    """2024-3 with only day 20 logged: 10 normal flash deliveries (R$ 15,00)."""
    return {
        "2024-3": {
            20: {
                "flash": {"normal": 10, "express": 0},
                "interlog": {"normal": 0, "express": 0},
                "ecommerce": {"normal": 0, "express": 0},
            },
        },
    }


@pytest.fixture
def after_march():
    return date(2024, 5, 1)
