"""Test: spring easing curve."""
import pytest

from dropdown import config
from dropdown.spring import spring_transition


@pytest.fixture
def spring():
    return spring_transition(
        config.SPRING_RESPONSE, config.SPRING_DAMPING, config.SPRING_DURATION
    )


def test_endpoints_are_exact(spring):
    assert spring(0) == 0.0
    assert spring(1) == 1.0


def test_underdamped_spring_overshoots(spring):
    samples = [spring(i / 100) for i in range(101)]
    assert max(samples) > 1.0
    assert max(samples) < 1.1


def test_settles_before_the_end(spring):
    assert spring(0.99) == pytest.approx(1.0, abs=1e-2)


@pytest.mark.parametrize("damping", [1.0, 1.5, -0.1])
def test_rejects_unsupported_damping(damping):
    with pytest.raises(ValueError):
        spring_transition(0.6, damping, 1.0)


def test_rejects_non_positive_duration():
    with pytest.raises(ValueError):
        spring_transition(0.6, 0.7, 0)
