from .easing import (
    Easing, EasingFunction, EasingLike, EASING_FUNCTIONS,
    get_easing, ease, normalized,
    linear,
    ease_in_quad, ease_out_quad, ease_in_out_quad,
    ease_in_cubic, ease_out_cubic, ease_in_out_cubic,
    ease_in_quartic, ease_out_quartic, ease_in_out_quartic,
    ease_in_quintic, ease_out_quintic, ease_in_out_quintic,
    ease_in_sine, ease_out_sine, ease_in_out_sine,
    ease_in_expo, ease_out_expo, ease_in_out_expo,
    ease_in_circular, ease_out_circular, ease_in_out_circular,
)
from .sequence import ease_map

__version__ = "0.2.0"

__all__ = [
    'Easing', 'EasingFunction', 'EasingLike', 'EASING_FUNCTIONS',
    'get_easing', 'ease', 'normalized', 'ease_map',
    'linear',
    'ease_in_quad', 'ease_out_quad', 'ease_in_out_quad',
    'ease_in_cubic', 'ease_out_cubic', 'ease_in_out_cubic',
    'ease_in_quartic', 'ease_out_quartic', 'ease_in_out_quartic',
    'ease_in_quintic', 'ease_out_quintic', 'ease_in_out_quintic',
    'ease_in_sine', 'ease_out_sine', 'ease_in_out_sine',
    'ease_in_expo', 'ease_out_expo', 'ease_in_out_expo',
    'ease_in_circular', 'ease_out_circular', 'ease_in_out_circular',
]
