import pytest

from lineargradient import LinearGradientWithAngle, RectSize
from lineargradient.samples.demo import DEMO_COLORS, DEMO_HEIGHT, DEMO_STOPS, DEMO_WIDTH


@pytest.fixture
def demo_size():
    return RectSize(DEMO_WIDTH, DEMO_HEIGHT)


@pytest.fixture
def demo_gradient():
    return LinearGradientWithAngle(DEMO_COLORS, stops=DEMO_STOPS, angle=45.0)
