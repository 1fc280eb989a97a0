import pytest

from ramp import generate_ramp


@pytest.fixture(scope="session")
def blue_ramp():
    return generate_ramp("Blue", "#5C8FBF")


@pytest.fixture(scope="session")
def red_ramp():
    return generate_ramp("Red", "#E53935")


@pytest.fixture(scope="session")
def green_ramp():
    return generate_ramp("Green", "#389C70")
