import pytest

from qr_skeleton import Grid


@pytest.fixture
def v1():
    return Grid.new(1)


@pytest.fixture
def client():
    from app import app

    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c
