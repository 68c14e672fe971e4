"""Duration field and bottom action button."""
from __future__ import annotations

import pygame

from ui.constants import (
    BUTTON_BG,
    BUTTON_H,
    BUTTON_HOVER,
    BUTTON_MARGIN,
    BUTTON_W,
    FIELD_BG,
    FIELD_H,
    FIELD_W,
    SCREEN_H,
    SCREEN_W,
    TEXT_COLOR,
    TEXT_DIM,
)


def button_rect() -> pygame.Rect:
    rect = pygame.Rect(0, 0, BUTTON_W, BUTTON_H)
    rect.midbottom = (SCREEN_W // 2, SCREEN_H - BUTTON_MARGIN)
    return rect


def draw_field(surface: pygame.Surface, font: pygame.font.Font, text: str) -> None:
    """Draw the rounded duration field centered on screen."""
    rect = pygame.Rect(0, 0, FIELD_W, FIELD_H)
    rect.center = (SCREEN_W // 2, SCREEN_H // 2)
    pygame.draw.rect(surface, FIELD_BG, rect, border_radius=FIELD_H // 2)
    label = font.render(text, True, TEXT_COLOR)
    surface.blit(label, label.get_rect(center=rect.center))


def draw_button(surface: pygame.Surface, font: pygame.font.Font, caption: str) -> None:
    rect = button_rect()
    hover = rect.collidepoint(pygame.mouse.get_pos())
    pygame.draw.rect(surface, BUTTON_HOVER if hover else BUTTON_BG, rect, border_radius=8)
    label = font.render(caption, True, TEXT_COLOR)
    surface.blit(label, label.get_rect(center=rect.center))


def draw_hint(surface: pygame.Surface, font: pygame.font.Font, text: str) -> None:
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, label.get_rect(midtop=(SCREEN_W // 2, 16)))
