"""Countdown Screen — single-screen countdown timer.

Exercises countdown, countdown-signal, and countdown-fsm.

Controls:
  0-9        Edit the duration (seconds)
  Backspace  Delete the last digit
  Enter      Start the countdown
  R          Start again (after the countdown ends)
  Click      Press the Start / Start Again button
  Esc        Quit
"""
from __future__ import annotations

import logging
import sys
import time

import pygame

from countdown import Counting, End, SetTimer, Start
from countdown_fsm import CountdownConfig, CountdownMachine

from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.controls import button_rect, draw_button, draw_field, draw_hint
from ui.wheels import count_to_arc, draw_wheels

logger = logging.getLogger("countdown_screen")

ARC_EASE = 8.0  # per second


class ScreenState:
    """Presentation-only state; the countdown itself lives in the machine."""

    def __init__(self) -> None:
        self.machine = CountdownMachine(CountdownConfig(interval=1.0))
        self.arc = 0.0
        # Rendering polls machine.state each frame; this only traces transitions.
        self.machine.subscribe(self._log_transition)

    def _log_transition(self, state) -> None:
        logger.debug("State: %r", state)

    def edit(self, event: pygame.event.Event) -> None:
        text = str(self.machine.state.count)
        if event.key == pygame.K_BACKSPACE:
            text = text[:-1] or "0"
        else:
            text += event.unicode
        self.machine.on_timer_changed(text)

    def press(self) -> None:
        state = self.machine.state
        if isinstance(state, (SetTimer, Start)):
            self.machine.on_count_down_start()
        elif isinstance(state, End):
            self.arc = 0.0
            self.machine.on_start_again()

    def update_arc(self, dt: float) -> None:
        state = self.machine.state
        if isinstance(state, Counting):
            target = count_to_arc(state.count, state.total_count)
            self.arc += (target - self.arc) * min(1.0, ARC_EASE * dt)
        elif isinstance(state, End):
            self.arc = 360.0


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Countdown")
    clock = pygame.time.Clock()
    big_font = pygame.font.SysFont("sans", 72)
    font = pygame.font.SysFont("sans", 28)
    small_font = pygame.font.SysFont("monospace", 13)

    state = ScreenState()
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    if isinstance(state.machine.state, (SetTimer, Start)):
                        state.press()
                elif event.key == pygame.K_r:
                    if isinstance(state.machine.state, End):
                        state.press()
                elif isinstance(state.machine.state, SetTimer):
                    state.edit(event)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if button_rect().collidepoint(event.pos):
                    state.press()

        state.update_arc(dt)

        # --- Render ---
        screen.fill(BG_COLOR)
        current = state.machine.state

        if isinstance(current, (SetTimer, Start)):
            draw_hint(screen, small_font, "Type seconds, Enter to start")
            draw_field(screen, font, str(current.count))
            draw_button(screen, font, "Start")
        elif isinstance(current, Counting):
            spinner = (time.monotonic() % 1.0) * 360.0
            draw_wheels(screen, big_font, state.arc, spinner, current.count)
        elif isinstance(current, End):
            draw_wheels(screen, big_font, 360.0, 360.0, current.count)
            draw_button(screen, font, "Start Again")

        pygame.display.flip()

    state.machine.shutdown()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
