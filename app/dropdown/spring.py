"""
Damped spring easing for kivy.animation.Animation
"""
import math


def spring_transition(response, damping, duration):
    """
    Build a transition callable for Animation(t=...).

    response is the period of the undamped spring in seconds, damping the
    damping fraction (must be below 1) and duration the length of the
    animation the transition is used with.
    """
    if response <= 0 or duration <= 0:
        raise ValueError("response and duration must be positive")
    if not 0 <= damping < 1:
        raise ValueError(f"damping must be in [0, 1), got {damping}")

    omega = 2 * math.pi / response
    decay = damping * omega
    omega_d = omega * math.sqrt(1 - damping**2)

    def progress(t):
        if t <= 0:
            return 0.0
        if t >= 1:
            return 1.0
        tau = t * duration
        envelope = math.exp(-decay * tau)
        return 1 - envelope * (
            math.cos(omega_d * tau) + decay / omega_d * math.sin(omega_d * tau)
        )

    return progress
