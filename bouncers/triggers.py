"""
Per-frame input triggers.

A trigger source exposes ``poll(frame) -> FrameTriggers``. Each flag is true
for at most the one frame in which its action happened.
"""

from dataclasses import dataclass
import os
from typing import Iterable, Tuple

os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')
import pygame

ADD_KEYS = (pygame.K_a, pygame.K_z)
REPORT_KEYS = (pygame.K_b, pygame.K_x)
QUIT_KEYS = (pygame.K_q, pygame.K_ESCAPE)


@dataclass(frozen=True)
class FrameTriggers:
    add: bool = False
    report: bool = False


class ScriptedTriggers:
    """Fires on fixed frame numbers. Used for headless runs."""

    def __init__(self, add_frames: Iterable[int] = (),
                 report_frames: Iterable[int] = ()):
        self.add_frames = frozenset(add_frames)
        self.report_frames = frozenset(report_frames)

    def poll(self, frame: int) -> FrameTriggers:
        return FrameTriggers(add=frame in self.add_frames,
                             report=frame in self.report_frames)


def triggers_from_events(events: Iterable[pygame.event.Event]) -> Tuple[FrameTriggers, bool]:
    """Map one frame's pygame events → (triggers, quit requested)."""
    add = report = quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key in ADD_KEYS:
                add = True
            elif event.key in REPORT_KEYS:
                report = True
            elif event.key in QUIT_KEYS:
                quit_requested = True
    return FrameTriggers(add=add, report=report), quit_requested
