from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from compound_calc.app import create_app


@pytest.fixture()
def app():
    return create_app({"TESTING": True, "MAX_YEARS": 100, "MAX_PERIODS_PER_YEAR": 365})


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
