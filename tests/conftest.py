import pytest

from numspace.space.linspace import linspace


@pytest.fixture
def x_axis():
    """[0.0, 0.5]"""
    return linspace(0.0, 1.0, 2)


@pytest.fixture
def y_axis():
    """[0.0, 0.5, 1.0, 1.5]"""
    return linspace(0.0, 2.0, 4)


@pytest.fixture
def z_axis():
    """[10.0, 20.0, 30.0]"""
    return linspace(10.0, 30.0, 3, inclusive=True)
