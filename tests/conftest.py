import pytest

from geojson_model import Position


def ring(*coordinates):
    return [Position(coordinate) for coordinate in coordinates]


@pytest.fixture
def exterior_ring():
    return ring((100.0, 0.0), (101.0, 0.0), (101.0, 1.0), (100.0, 1.0), (100.0, 0.0))


@pytest.fixture
def hole_ring():
    return ring((100.8, 0.8), (100.8, 0.2), (100.2, 0.2), (100.2, 0.8), (100.8, 0.8))


@pytest.fixture
def square_ring():
    return ring((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0))
