"""
Shared test fixtures — test client and sample configurator form fields.
"""

import pytest
from fastapi.testclient import TestClient

from configurator.main import app
from configurator.orders import get_order_submission


@pytest.fixture
def client():
    """FastAPI test client."""
    yield TestClient(app)
    app.dependency_overrides.pop(get_order_submission, None)


@pytest.fixture
def window_fields():
    """The configurator's opening state: 120 × 150 PVC window, double glass, one vertical bar."""
    return {
        "product_type": "window",
        "width_cm": 120,
        "height_cm": 150,
        "frame_thickness_cm": 6,
        "bar_thickness_cm": 3,
        "vertical_bars": 1,
        "horizontal_bars": 0,
        "profile_material": "PVC",
        "glass_type": "double",
        "frame_color": "#333333",
        "bar_color": "#333333",
    }


@pytest.fixture
def door_fields(window_fields):
    return {**window_fields, "product_type": "door"}
