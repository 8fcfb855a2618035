import argparse
import os

import numpy as np
import pygame
from PIL import Image

from isotile import InputState, SimulationService, load_config_from_yaml, render_commands
from isotile.wrappers import PygameSurface


def main():
    parser = argparse.ArgumentParser(description="Render one frame headless and save it as PNG.")
    parser.add_argument("--config", default="src/isotile/configs/default_config.yaml")
    parser.add_argument("--ticks", type=int, default=15, help="Ticks of 'D' held before rendering.")
    parser.add_argument("--output", default="tmp/verification_frame.png")
    args = parser.parse_args()

    if not os.path.exists(args.config):
        print(f"Config {args.config} not found.")
        return

    print(f"Loading config: {args.config}")
    config = load_config_from_yaml(args.config)
    sim = SimulationService(config)
    sim.initialize()

    for _ in range(args.ticks):
        sim.advance_frame(InputState.from_codes({ord("D")}))
    frame = sim.build_frame()

    # No window needed
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    canvas = pygame.Surface((800, 600))
    canvas.fill((255, 255, 255))

    surface = PygameSurface(canvas)
    render_commands(surface, frame.iso_commands, sort=True)
    render_commands(surface, frame.top_commands, sort=False)

    # surfarray is (W, H, 3)
    img = Image.fromarray(np.transpose(pygame.surfarray.array3d(canvas), (1, 0, 2)))
    out_dir = os.path.dirname(args.output)
    if out_dir and not os.path.exists(out_dir):
        os.makedirs(out_dir)
    img.save(args.output)
    print(f"Saved frame ({len(frame.iso_commands)} iso / {len(frame.top_commands)} top commands) to {args.output}")

    pygame.quit()


if __name__ == "__main__":
    main()
