"""
Frame loop, one synchronous frame at a time.

Frame: triggers → advance rng → (add) → (report) → bounce others → move the
distinguished bouncer onto their centroid → present.
"""

import itertools
import logging
import numpy as np
from typing import Callable, Dict, Iterable, Optional

from bouncers.config import SimulationConfig
from bouncers.fixed import Fixed
from bouncers.registry import BouncerRegistry
from bouncers.rng import RandomSource
from bouncers.triggers import FrameTriggers, ScriptedTriggers
from bouncers.visual import SpriteFactory

logger = logging.getLogger(__name__)

Emitter = Callable[[str, Fixed], None]

REPORT_LABEL = "Average x: "


def log_emit(label: str, value: Fixed):
    logger.info("%s%s", label, value)


class SimulationLoop:

    def __init__(self, config: Optional[SimulationConfig] = None,
                 triggers=None, presenter=None,
                 emit: Optional[Emitter] = None,
                 sprites: Optional[SpriteFactory] = None):
        self.config = (config or SimulationConfig()).validate()
        self.viewport = self.config.viewport
        self.rng = RandomSource(self.config.seed)
        self.registry = BouncerRegistry(
            self.rng, sprites,
            capacity=self.config.max_bouncers,
            speed_range=self.config.speed_range,
            velocity_includes_distinguished=self.config.velocity_includes_distinguished,
        )
        self.triggers = triggers or ScriptedTriggers()
        self.presenter = presenter
        self.emit = emit or log_emit
        self.frame = 0

        # The distinguished bouncer exists before any aggregate is queried
        self.rng.advance()
        self.registry.add()

    def step(self) -> FrameTriggers:
        triggers = self.triggers.poll(self.frame)

        self.rng.advance()
        if triggers.add:
            self.registry.add()
        if triggers.report:
            self.emit(REPORT_LABEL, self.registry.average_velocity_x())

        for bouncer in self.registry.others:
            bouncer.update(self.viewport)

        # Reads post-update positions of this frame
        self.registry.distinguished.override_position(*self.registry.centroid())

        self.frame += 1
        return triggers

    def run(self, n_frames: Optional[int] = None) -> int:
        """Run until ``n_frames`` have elapsed or the presenter stops. Returns frames run."""
        frames = itertools.count() if n_frames is None else range(n_frames)
        start = self.frame
        for _ in frames:
            self.step()
            if self.presenter is not None and not self.presenter.present(self.registry):
                break
        return self.frame - start


def record_trajectory(config: Optional[SimulationConfig] = None, n_frames: int = 600,
                      add_frames: Iterable[int] = (),
                      report_frames: Iterable[int] = (),
                      emit: Optional[Emitter] = None) -> Dict:
    """Headless run. Returns dict with per-frame states, centroid and count."""
    loop = SimulationLoop(config, ScriptedTriggers(add_frames, report_frames), emit=emit)

    states = [loop.registry.get_state()]
    centroid = [[float(v) for v in loop.registry.centroid()]]
    count = [len(loop.registry)]

    for _ in range(n_frames):
        loop.step()
        states.append(loop.registry.get_state())
        centroid.append([float(v) for v in loop.registry.centroid()])
        count.append(len(loop.registry))

    return {
        'states': states,
        'positions': [s[:, :2] for s in states],
        'centroid': np.array(centroid),
        'count': np.array(count),
        'config': loop.config,
    }
