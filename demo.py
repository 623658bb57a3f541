"""
Watch the swarm bounce.
Run: python demo.py
A / Z adds a bouncer, B / X logs the average x speed.
Press Q or close window to exit.
"""
import argparse
import logging

import bouncers as B
from bouncers.config import SimulationConfig
from bouncers.logging_config import setup_logging
from bouncers.loop import SimulationLoop
from bouncers.renderer import AppearanceConfig, Window


def main():
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--seed", type=int, default=B.SEED)
    parser.add_argument("--max-bouncers", type=int, default=B.MAX_BOUNCERS)
    parser.add_argument("--fps", type=int, default=B.FPS)
    parser.add_argument("--scale", type=int, default=B.PIXEL_SCALE, help="pixels per viewport unit")
    parser.add_argument("--frames", type=int, default=None, help="stop after N frames; default runs until closed")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    args = parser.parse_args()

    setup_logging(getattr(logging, args.log_level), args.log_file)

    config = SimulationConfig(seed=args.seed, max_bouncers=args.max_bouncers, fps=args.fps)
    with Window(config.validate().viewport, fps=config.fps,
                config=AppearanceConfig(scale=args.scale)) as window:
        loop = SimulationLoop(config, triggers=window, presenter=window)
        loop.run(args.frames)

    logging.getLogger("bouncers").info("Stopped after %d frames with %d bouncers",
                                       loop.frame, len(loop.registry))


if __name__ == '__main__':
    main()
