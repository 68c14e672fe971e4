"""Countdown wheels: progress arc, one-second spinner, and the count."""
from __future__ import annotations

import math

import pygame

from ui.constants import (
    INNER_INSET,
    OUTER_STROKE,
    PRIMARY,
    SCREEN_H,
    SCREEN_W,
    SECONDARY,
    TEXT_COLOR,
    WHEEL_SIZE,
)

# pygame angles run counter-clockwise from 3 o'clock; 12 o'clock is pi/2
_TOP = math.pi / 2


def count_to_arc(count: int, total_count: int) -> float:
    """Degrees of the outer arc already unwound."""
    return float(360 - (count * 360) // total_count)


def _wheel_rect() -> pygame.Rect:
    rect = pygame.Rect(0, 0, WHEEL_SIZE, WHEEL_SIZE)
    rect.center = (SCREEN_W // 2, SCREEN_H // 2)
    return rect


def _draw_outer_arc(surface: pygame.Surface, rect: pygame.Rect, sweep: float) -> None:
    if sweep <= 0:
        return
    if sweep >= 360:
        pygame.draw.circle(surface, PRIMARY, rect.center, rect.w // 2, OUTER_STROKE)
        return
    # Clockwise from 12 o'clock
    start = _TOP - math.radians(sweep)
    pygame.draw.arc(surface, PRIMARY, rect, start, _TOP, OUTER_STROKE)


def _draw_inner_pie(surface: pygame.Surface, rect: pygame.Rect, sweep: float) -> None:
    inner = rect.inflate(-2 * INNER_INSET, -2 * INNER_INSET)
    radius = inner.w / 2
    cx, cy = inner.center
    steps = max(2, int(sweep / 4))
    points = [(cx, cy)]
    for i in range(steps + 1):
        angle = _TOP - math.radians(sweep * i / steps)
        points.append((cx + radius * math.cos(angle), cy - radius * math.sin(angle)))
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    pygame.draw.polygon(overlay, (*SECONDARY, 204), points)
    surface.blit(overlay, (0, 0))


def draw_wheels(
    surface: pygame.Surface,
    font: pygame.font.Font,
    arc: float,
    spinner: float,
    count: int,
) -> None:
    """Draw the outer progress arc, the inner spinner, and the centered count."""
    rect = _wheel_rect()
    _draw_outer_arc(surface, rect, arc)
    if spinner > 0:
        _draw_inner_pie(surface, rect, spinner)
    label = font.render(str(count), True, TEXT_COLOR)
    surface.blit(label, label.get_rect(center=rect.center))
