"""
Trace the actor state tick by tick for a scripted key sequence.

Usage:
    python scripts/trace_ticks.py --keys D --ticks 30
    python scripts/trace_ticks.py --keys DS --ticks 30 --jump-at 5
    python scripts/trace_ticks.py --config src/isotile/configs/default_config.yaml --jit
"""
import argparse
import math
import os

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from isotile import InputState, SimConfig, SimulationService, load_config_from_yaml
from isotile.systems.input import KEY_SPACE


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print a per-tick trace of the simulation.")
    parser.add_argument("--config", default=None, help="Path to YAML config (defaults if omitted).")
    parser.add_argument("--keys", default="", help="Keys held every tick, e.g. 'D' or 'DS'.")
    parser.add_argument("--ticks", type=int, default=30, help="Number of ticks to run.")
    parser.add_argument("--jump-at", type=int, default=None, help="Tick on which Space is also held.")
    parser.add_argument("--jit", action="store_true", help="Compile the physics step with jax.jit.")
    return parser.parse_args()


def main():
    args = parse_args()

    if args.config is not None:
        if not os.path.exists(args.config):
            raise FileNotFoundError(f"Config not found: {args.config}")
        config = load_config_from_yaml(args.config)
    else:
        config = SimConfig()
    if args.jit:
        config.use_jit = True

    sim = SimulationService(config)
    sim.initialize()

    held = {ord(c) for c in args.keys.upper()}

    table = Table(title=f"keys={args.keys or '-'} ticks={args.ticks}")
    for name in ("tick", "x", "y", "z", "vz", "angle (deg)", "clock"):
        table.add_column(name, justify="right")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        transient=True,
    ) as progress:
        task = progress.add_task("[green]Ticks", total=args.ticks)
        for tick in range(1, args.ticks + 1):
            codes = set(held)
            if args.jump_at == tick:
                codes.add(KEY_SPACE)
            sim.advance_frame(InputState.from_codes(codes))

            actor = sim.actor
            x, y = actor.position.to_tuple()
            table.add_row(
                str(tick),
                f"{x:.4f}",
                f"{y:.4f}",
                f"{float(actor.z_height):.4f}",
                f"{float(actor.z_velocity):+.4f}",
                f"{math.degrees(float(actor.facing_angle)):.1f}",
                str(int(actor.animation_clock)),
            )
            progress.advance(task)

    Console().print(table)


if __name__ == "__main__":
    main()
