"""
Play the isometric tile simulation in a pygame window.

Usage:
    python scripts/play_human.py [path/to/config.yaml]
"""
import argparse
import os

import pygame

from isotile import SimConfig, SimulationService, load_config_from_yaml, render_commands
from isotile.systems.overlays import draw_arrow, draw_tile_heights
from isotile.utils.vec2 import Vector2
from isotile.wrappers import PygameSurface, pygame_input_state


W, H = 800, 600
BACKGROUND = (255, 255, 255)


def main():
    parser = argparse.ArgumentParser(description="Play the isometric tile simulation")
    parser.add_argument("config_path", type=str, nargs="?", default=None, help="Path to YAML configuration file")
    args = parser.parse_args()

    # Load configuration
    if args.config_path is not None:
        try:
            print(f"Loading configuration from {args.config_path}...")
            config = load_config_from_yaml(args.config_path)
        except AssertionError as e:
            print(f"Error loading configuration: {e}")
            return
    else:
        config = SimConfig()

    sim = SimulationService(config)

    pygame.init()
    screen = pygame.display.set_mode((W, H))
    title = os.path.basename(args.config_path) if args.config_path else "defaults"
    pygame.display.set_caption(f"isotile - {title}")

    font = pygame.font.SysFont("monospace", 16)
    clock = pygame.time.Clock()
    surface = PygameSurface(screen)

    sim.initialize()
    show_debug = False

    print("\nControls:")
    print("  W/A/S/D : Move")
    print("  Space   : Jump")
    print("  H       : Toggle tile heights / facing arrow")
    print("  R       : Reset")
    print("  Q/Esc   : Quit")

    running = True
    while running:
        # Event Handling
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
                elif event.key == pygame.K_r:
                    sim.initialize()
                elif event.key == pygame.K_h:
                    show_debug = not show_debug

        sim.advance_frame(pygame_input_state())
        frame = sim.build_frame()

        screen.fill(BACKGROUND)
        render_commands(surface, frame.iso_commands, sort=True)
        render_commands(surface, frame.top_commands, sort=False)

        if show_debug:
            iso = config.iso_view.basis()
            draw_tile_heights(surface, frame.grid, iso, config.iso_view.view_size)

            # Facing arrow in the top view
            top = config.top_view.basis()
            x, y = frame.player_position.to_tuple()
            foot = top.root.add(top.x_axis.mul(x)).add(top.y_axis.mul(y))
            way = Vector2.right().rotated(float(sim.actor.facing_angle)).mul(30.0)
            surface.push()
            surface.stroke("red")
            surface.stroke_weight(2)
            draw_arrow(surface, foot, way, brim_size=8)
            surface.pop()

        # HUD
        x, y = frame.player_position.to_tuple()
        lines = [
            f"x={x:6.2f} y={y:6.2f} z={float(sim.actor.z_height):6.2f}",
            f"fps={clock.get_fps():5.1f}",
        ]
        for i, s in enumerate(lines):
            txt = font.render(s, True, (0, 0, 0))
            screen.blit(txt, (6, 6 + 18 * i))

        pygame.display.flip()
        clock.tick(60)  # 60 FPS

    pygame.quit()


if __name__ == "__main__":
    main()
