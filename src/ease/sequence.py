from __future__ import annotations

from typing import Iterable, List

from .easing import EasingLike, get_easing


def ease_map(values: Iterable[float], easing: EasingLike) -> List[float]:
    """Apply ``easing`` across ``values`` and return the eased list.

    The first and last samples fix the start value and the change in value.
    The duration is taken to be the change in value itself, so this is a
    demonstration helper rather than a general timeline mapper: a sequence
    whose first and last samples are equal divides by zero.
    """
    fn = get_easing(easing)
    values = list(values)
    start_value = values[0]
    change_in_value = values[-1] - start_value
    duration = change_in_value
    return [fn(v - start_value, start_value, change_in_value, duration) for v in values]


__all__ = ["ease_map"]
