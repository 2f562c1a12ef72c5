"""Standard easing curves.

Every curve takes the four canonical arguments ``(current_time,
start_value, change_in_value, duration)`` and returns the eased value.
Apart from the exponential family, ``start_value`` is returned at
``current_time == 0`` and ``start_value + change_in_value`` at
``current_time == duration``.

Inputs are not validated or clamped.  Arithmetic edge cases surface as
Python's own float behaviour: a zero ``duration`` raises
``ZeroDivisionError``, the circular curves raise ``ValueError`` when the
normalised time leaves ``[-1, 1]`` and the exponential curves raise
``OverflowError`` for very large arguments.

See https://easings.net for plots of each curve.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, Union

EasingFunction = Callable[[float, float, float, float], float]


class Easing(str, Enum):
    """Names of the supported easing curves."""

    LINEAR = "linear"
    EASE_IN_QUAD = "ease_in_quad"
    EASE_OUT_QUAD = "ease_out_quad"
    EASE_IN_OUT_QUAD = "ease_in_out_quad"
    EASE_IN_CUBIC = "ease_in_cubic"
    EASE_OUT_CUBIC = "ease_out_cubic"
    EASE_IN_OUT_CUBIC = "ease_in_out_cubic"
    EASE_IN_QUARTIC = "ease_in_quartic"
    EASE_OUT_QUARTIC = "ease_out_quartic"
    EASE_IN_OUT_QUARTIC = "ease_in_out_quartic"
    EASE_IN_QUINTIC = "ease_in_quintic"
    EASE_OUT_QUINTIC = "ease_out_quintic"
    EASE_IN_OUT_QUINTIC = "ease_in_out_quintic"
    EASE_IN_SINE = "ease_in_sine"
    EASE_OUT_SINE = "ease_out_sine"
    EASE_IN_OUT_SINE = "ease_in_out_sine"
    EASE_IN_EXPO = "ease_in_expo"
    EASE_OUT_EXPO = "ease_out_expo"
    EASE_IN_OUT_EXPO = "ease_in_out_expo"
    EASE_IN_CIRCULAR = "ease_in_circular"
    EASE_OUT_CIRCULAR = "ease_out_circular"
    EASE_IN_OUT_CIRCULAR = "ease_in_out_circular"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Linear
# ---------------------------------------------------------------------------


def linear(current_time: float, start_value: float, change_in_value: float,
           duration: float) -> float:
    """No easing; constant velocity."""
    return change_in_value * current_time / duration + start_value


# ---------------------------------------------------------------------------
# Polynomial curves
# ---------------------------------------------------------------------------


def ease_in_quad(current_time: float, start_value: float, change_in_value: float,
                 duration: float) -> float:
    """Quadratic ease-in, accelerating from zero velocity."""
    t = current_time / duration
    return change_in_value * t ** 2 + start_value


def ease_out_quad(current_time: float, start_value: float, change_in_value: float,
                  duration: float) -> float:
    """Quadratic ease-out, decelerating to zero velocity."""
    t = current_time / duration
    return -change_in_value * t * (t - 2) + start_value


def ease_in_out_quad(current_time: float, start_value: float, change_in_value: float,
                     duration: float) -> float:
    """Quadratic acceleration until halfway, then deceleration."""
    t = current_time / (duration / 2)
    if t < 1:
        return change_in_value / 2 * t ** 2 + start_value
    t -= 1
    return -change_in_value / 2 * (t * (t - 2) - 1) + start_value


def ease_in_cubic(current_time: float, start_value: float, change_in_value: float,
                  duration: float) -> float:
    """Cubic ease-in."""
    t = current_time / duration
    return change_in_value * t ** 3 + start_value


def ease_out_cubic(current_time: float, start_value: float, change_in_value: float,
                   duration: float) -> float:
    """Cubic ease-out."""
    t = current_time / duration - 1
    return change_in_value * (t ** 3 + 1) + start_value


def ease_in_out_cubic(current_time: float, start_value: float, change_in_value: float,
                      duration: float) -> float:
    """Cubic ease-in-out."""
    t = current_time / (duration / 2)
    if t < 1:
        return change_in_value / 2 * t ** 3 + start_value
    t -= 2
    return change_in_value / 2 * (t ** 3 + 2) + start_value


def ease_in_quartic(current_time: float, start_value: float, change_in_value: float,
                    duration: float) -> float:
    """Quartic ease-in."""
    t = current_time / duration
    return change_in_value * t ** 4 + start_value


def ease_out_quartic(current_time: float, start_value: float, change_in_value: float,
                     duration: float) -> float:
    """Quartic ease-out."""
    t = current_time / duration - 1
    return -change_in_value * (t ** 4 - 1) + start_value


def ease_in_out_quartic(current_time: float, start_value: float, change_in_value: float,
                        duration: float) -> float:
    """Quartic ease-in-out."""
    t = current_time / (duration / 2)
    if t < 1:
        return change_in_value / 2 * t ** 4 + start_value
    t -= 2
    return -change_in_value / 2 * (t ** 4 - 2) + start_value


def ease_in_quintic(current_time: float, start_value: float, change_in_value: float,
                    duration: float) -> float:
    """Quintic ease-in."""
    t = current_time / duration
    return change_in_value * t ** 5 + start_value


def ease_out_quintic(current_time: float, start_value: float, change_in_value: float,
                     duration: float) -> float:
    """Quintic ease-out."""
    t = current_time / duration - 1
    return change_in_value * (t ** 5 + 1) + start_value


def ease_in_out_quintic(current_time: float, start_value: float, change_in_value: float,
                        duration: float) -> float:
    """Quintic ease-in-out."""
    t = current_time / (duration / 2)
    if t < 1:
        return change_in_value / 2 * t ** 5 + start_value
    t -= 2
    return change_in_value / 2 * (t ** 5 + 2) + start_value


# ---------------------------------------------------------------------------
# Sinusoidal curves
# ---------------------------------------------------------------------------


def ease_in_sine(current_time: float, start_value: float, change_in_value: float,
                 duration: float) -> float:
    """Sinusoidal ease-in."""
    return (-change_in_value * math.cos(current_time / duration * math.pi / 2)
            + change_in_value + start_value)


def ease_out_sine(current_time: float, start_value: float, change_in_value: float,
                  duration: float) -> float:
    """Sinusoidal ease-out."""
    return change_in_value * math.sin(current_time / duration * math.pi / 2) + start_value


def ease_in_out_sine(current_time: float, start_value: float, change_in_value: float,
                     duration: float) -> float:
    """Sinusoidal ease-in-out."""
    return -change_in_value / 2 * (math.cos(math.pi * current_time / duration) - 1) + start_value


# ---------------------------------------------------------------------------
# Exponential curves
# ---------------------------------------------------------------------------


def ease_in_expo(current_time: float, start_value: float, change_in_value: float,
                 duration: float) -> float:
    """Exponential ease-in.

    There is no special case for ``current_time == 0``, so the curve starts
    ``change_in_value / 1024`` above ``start_value``.
    """
    return change_in_value * math.pow(2, 10 * (current_time / duration - 1)) + start_value


def ease_out_expo(current_time: float, start_value: float, change_in_value: float,
                  duration: float) -> float:
    """Exponential ease-out, ending ``change_in_value / 1024`` short of the target."""
    return change_in_value * (1 - math.pow(2, -10 * current_time / duration)) + start_value


def ease_in_out_expo(current_time: float, start_value: float, change_in_value: float,
                     duration: float) -> float:
    """Exponential ease-in-out."""
    t = current_time / (duration / 2)
    if t < 1:
        return change_in_value / 2 * math.pow(2, 10 * (t - 1)) + start_value
    t -= 1
    return change_in_value / 2 * (2 - math.pow(2, -10 * t)) + start_value


# ---------------------------------------------------------------------------
# Circular curves
# ---------------------------------------------------------------------------


def ease_in_circular(current_time: float, start_value: float, change_in_value: float,
                     duration: float) -> float:
    """Circular ease-in."""
    t = current_time / duration
    return -change_in_value * (math.sqrt(1 - t ** 2) - 1) + start_value


def ease_out_circular(current_time: float, start_value: float, change_in_value: float,
                      duration: float) -> float:
    """Circular ease-out."""
    t = current_time / duration - 1
    return change_in_value * math.sqrt(1 - t ** 2) + start_value


def ease_in_out_circular(current_time: float, start_value: float, change_in_value: float,
                         duration: float) -> float:
    """Circular ease-in-out."""
    t = current_time / (duration / 2)
    if t < 1:
        return -change_in_value / 2 * (math.sqrt(1 - t ** 2) - 1) + start_value
    t -= 2
    return change_in_value / 2 * (math.sqrt(1 - t ** 2) + 1) + start_value


EASING_FUNCTIONS: Dict[str, EasingFunction] = {
    Easing.LINEAR.value: linear,
    Easing.EASE_IN_QUAD.value: ease_in_quad,
    Easing.EASE_OUT_QUAD.value: ease_out_quad,
    Easing.EASE_IN_OUT_QUAD.value: ease_in_out_quad,
    Easing.EASE_IN_CUBIC.value: ease_in_cubic,
    Easing.EASE_OUT_CUBIC.value: ease_out_cubic,
    Easing.EASE_IN_OUT_CUBIC.value: ease_in_out_cubic,
    Easing.EASE_IN_QUARTIC.value: ease_in_quartic,
    Easing.EASE_OUT_QUARTIC.value: ease_out_quartic,
    Easing.EASE_IN_OUT_QUARTIC.value: ease_in_out_quartic,
    Easing.EASE_IN_QUINTIC.value: ease_in_quintic,
    Easing.EASE_OUT_QUINTIC.value: ease_out_quintic,
    Easing.EASE_IN_OUT_QUINTIC.value: ease_in_out_quintic,
    Easing.EASE_IN_SINE.value: ease_in_sine,
    Easing.EASE_OUT_SINE.value: ease_out_sine,
    Easing.EASE_IN_OUT_SINE.value: ease_in_out_sine,
    Easing.EASE_IN_EXPO.value: ease_in_expo,
    Easing.EASE_OUT_EXPO.value: ease_out_expo,
    Easing.EASE_IN_OUT_EXPO.value: ease_in_out_expo,
    Easing.EASE_IN_CIRCULAR.value: ease_in_circular,
    Easing.EASE_OUT_CIRCULAR.value: ease_out_circular,
    Easing.EASE_IN_OUT_CIRCULAR.value: ease_in_out_circular,
}

EasingLike = Union[Easing, str, EasingFunction]


def get_easing(easing: EasingLike) -> EasingFunction:
    """Return the curve for ``easing``.

    ``easing`` may be an :class:`Easing` member, its name, or a callable
    with the four-argument signature which is returned unchanged.  Unknown
    names raise ``KeyError``.
    """
    if isinstance(easing, str):
        # Easing members are str subclasses; normalise them to their value
        name = str(easing)
        if name not in EASING_FUNCTIONS:
            raise KeyError(f"Unknown easing '{name}'")
        return EASING_FUNCTIONS[name]
    if callable(easing):
        return easing
    raise KeyError(f"Unknown easing '{easing!r}'")


def ease(easing: EasingLike, current_time: float, start_value: float,
         change_in_value: float, duration: float) -> float:
    """Evaluate the curve named by ``easing``."""
    return get_easing(easing)(current_time, start_value, change_in_value, duration)


def normalized(easing: EasingLike) -> Callable[[float], float]:
    """Return ``easing`` as a function of progress in ``[0, 1]``."""
    fn = get_easing(easing)

    def curve(progress: float) -> float:
        return fn(progress, 0.0, 1.0, 1.0)

    curve.__name__ = getattr(fn, "__name__", "curve")
    return curve


__all__ = [
    "Easing",
    "EasingFunction",
    "EasingLike",
    "EASING_FUNCTIONS",
    "get_easing",
    "ease",
    "normalized",
    *EASING_FUNCTIONS,
]
