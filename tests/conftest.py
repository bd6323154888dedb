import pytest


@pytest.fixture
def square():
    return [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


@pytest.fixture
def rectangle():
    # 20 wide along x, 10 deep along y
    return [(0.0, 0.0), (20.0, 0.0), (20.0, 10.0), (0.0, 10.0)]


@pytest.fixture
def l_shape():
    # Counter-clockwise, area 3; vertex 0 cannot see the notch corner
    return [(0.0, 2.0), (0.0, 0.0), (2.0, 0.0), (2.0, 1.0), (1.0, 1.0), (1.0, 2.0)]
