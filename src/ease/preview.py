"""Render easing curves with Pygame."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import pygame

from .easing import EASING_FUNCTIONS, EasingLike, get_easing, normalized
from .options import DEFAULT_OPTIONS

logger = logging.getLogger(__name__)

# Padding inside each cell around the unit box
CELL_PAD = 12
# Space reserved under each cell for its label
LABEL_HEIGHT = 18

_FONT_CACHE: Dict[int, pygame.font.Font] = {}


def get_font(size: int) -> pygame.font.Font:
    """Return a cached default font of ``size`` pixels."""
    if not pygame.font.get_init():
        pygame.font.init()
    font = _FONT_CACHE.get(size)
    if font is None:
        font = pygame.font.Font(None, size)
        _FONT_CACHE[size] = font
    return font


def sample_curve(easing: EasingLike, samples: int = 100) -> List[Tuple[float, float]]:
    """Return ``samples + 1`` ``(progress, value)`` points across ``[0, 1]``."""
    if samples < 1:
        raise ValueError("samples must be at least 1")
    curve = normalized(easing)
    return [(i / samples, curve(i / samples)) for i in range(samples + 1)]


def draw_curve(
    surface: pygame.Surface,
    easing: EasingLike,
    rect: pygame.Rect,
    color: Tuple[int, int, int],
    samples: int = 100,
    width: int = 2,
) -> None:
    """Plot ``easing`` inside ``rect`` with progress on x and value on y.

    The unit box maps onto ``rect`` with y pointing up.  Values outside
    ``[0, 1]`` are drawn outside the box rather than clamped.
    """
    points = [
        (rect.left + x * rect.width, rect.bottom - y * rect.height)
        for x, y in sample_curve(easing, samples)
    ]
    pygame.draw.lines(surface, color, False, points, width)


def _label(easing: EasingLike) -> str:
    if isinstance(easing, str):
        return str(easing)
    return getattr(easing, "__name__", "custom")


def render_preview(
    easings: Optional[Sequence[EasingLike]] = None,
    options: Optional[Dict[str, Any]] = None,
) -> pygame.Surface:
    """Return a surface with one framed, labelled cell per curve."""
    opts = dict(DEFAULT_OPTIONS)
    if options:
        opts.update(options)
    if easings is None:
        easings = list(EASING_FUNCTIONS)
    # Resolve everything up front so an unknown name fails before drawing
    resolved = [(e, get_easing(e)) for e in easings]

    cell_w, cell_h = opts["cell_width"], opts["cell_height"]
    columns = max(1, min(opts["columns"], len(resolved) or 1))
    rows = max(1, -(-len(resolved) // columns))
    surface = pygame.Surface((cell_w * columns, (cell_h + LABEL_HEIGHT) * rows))
    surface.fill(tuple(opts["background"]))
    font = get_font(LABEL_HEIGHT)

    for idx, (easing, fn) in enumerate(resolved):
        col, row = idx % columns, idx // columns
        cell = pygame.Rect(col * cell_w, row * (cell_h + LABEL_HEIGHT), cell_w, cell_h)
        box = cell.inflate(-CELL_PAD * 2, -CELL_PAD * 2)
        pygame.draw.rect(surface, tuple(opts["frame_color"]), box, width=1)
        draw_curve(surface, fn, box, tuple(opts["curve_color"]),
                   samples=opts["samples"], width=opts["line_width"])
        text = font.render(_label(easing), True, tuple(opts["label_color"]))
        surface.blit(text, text.get_rect(midtop=(cell.centerx, cell.bottom)))
    return surface


def save_preview(
    path: Path,
    easings: Optional[Iterable[EasingLike]] = None,
    options: Optional[Dict[str, Any]] = None,
) -> Path:
    """Render a preview and write it to ``path``."""
    path = Path(path)
    if easings is not None:
        easings = list(easings)
    surface = render_preview(easings, options)
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(surface, str(path))
    count = len(easings) if easings is not None else len(EASING_FUNCTIONS)
    logger.info("Saved preview of %d curves to %s", count, path)
    return path


__all__ = [
    "CELL_PAD",
    "LABEL_HEIGHT",
    "get_font",
    "sample_curve",
    "draw_curve",
    "render_preview",
    "save_preview",
]
