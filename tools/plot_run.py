#!/usr/bin/env python3
"""
Firing-plan run plotter

Runs the evolution engine from a YAML config (the `engine` node of
config/config.yaml by default) and renders:
- the best trajectory of selected generations against the wall
- best and mean fitness per generation

Usage:
    python tools/plot_run.py --config config/config.yaml --output-folder plots [options]

Options:
    --generations N [N ...]   Generations whose best trajectory is drawn
                              (default: first, a few in between, last)
    --seed SEED               Override the configured seed
    --no-csv                  Skip the history CSV export
"""

import argparse
from pathlib import Path

from loguru import logger
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from omegaconf import OmegaConf  # noqa: E402
import seaborn as sns  # noqa: E402

from cannonevo.evolution.engine import EvolutionEngine, GenerationSnapshot  # noqa: E402
from cannonevo.physics.models import Wall  # noqa: E402
from cannonevo.physics.simulator import trajectory_points  # noqa: E402
from cannonevo.utils.trackers import HistoryTracker, LoguruTracker  # noqa: E402


class RunPlotter:
    """Plots the output of one engine run."""

    def __init__(self, wall: Wall, gravity: float):
        self.wall = wall
        self.gravity = gravity
        self._configure_plotting_style()

    def _configure_plotting_style(self):
        sns.set_theme(style="whitegrid", context="talk", palette="deep")
        plt.rcParams.update(
            {
                "axes.titleweight": "bold",
                "axes.spines.top": False,
                "axes.spines.right": False,
                "grid.alpha": 0.25,
                "savefig.dpi": 200,
                "figure.dpi": 120,
            }
        )

    def _save_fig(self, fig: plt.Figure, path: Path) -> Path:
        fig.savefig(path, bbox_inches="tight")
        plt.close(fig)
        logger.info(f"Saved figure to {path}")
        return path

    def plot_trajectories(
        self, snapshots: list[GenerationSnapshot], path: Path
    ) -> Path:
        fig, ax = plt.subplots(figsize=(12, 7))
        palette = sns.color_palette("viridis", n_colors=max(len(snapshots), 1))
        for color, snap in zip(palette, snapshots):
            x, y = trajectory_points(
                snap.best.velocity, snap.best.angle, self.wall, gravity=self.gravity
            )
            ax.plot(
                x,
                y,
                color=color,
                linewidth=2,
                label=f"gen {snap.generation}: {snap.best_outcome.value} "
                f"({snap.best.velocity:.1f} m/s, {snap.best.angle:.1f}°)",
            )
        ax.vlines(
            self.wall.distance,
            0,
            self.wall.height,
            colors="black",
            linewidth=5,
            label="wall",
        )
        ax.set_xlabel("Distance (m)")
        ax.set_ylabel("Height (m)")
        ax.set_title("Best firing plan by generation")
        ax.set_ylim(bottom=0)
        ax.legend(loc="upper right", fontsize=10)
        return self._save_fig(fig, path)

    def plot_fitness(self, history: HistoryTracker, path: Path) -> Path:
        df = history.to_frame()
        fig, ax = plt.subplots(figsize=(12, 6))
        ax.plot(df["generation"], df["best_fitness"], linewidth=2, label="best")
        ax.plot(df["generation"], df["mean_fitness"], linewidth=2, label="mean")
        ax.fill_between(
            df["generation"],
            df["mean_fitness"] - df["std_fitness"],
            df["mean_fitness"] + df["std_fitness"],
            alpha=0.2,
            label="mean ± std",
        )
        ax.set_xlabel("Generation")
        ax.set_ylabel("Fitness")
        ax.set_title("Fitness per generation")
        ax.legend()
        return self._save_fig(fig, path)


def _pick_generations(
    history: HistoryTracker, requested: list[int] | None
) -> list[GenerationSnapshot]:
    snapshots = history.snapshots
    if requested:
        by_gen = {s.generation: s for s in snapshots}
        missing = [g for g in requested if g not in by_gen]
        if missing:
            logger.warning(f"Generations not in run, skipped: {missing}")
        return [by_gen[g] for g in requested if g in by_gen]
    step = max(len(snapshots) // 4, 1)
    picked = snapshots[::step]
    if picked[-1] is not snapshots[-1]:
        picked.append(snapshots[-1])
    return picked


def main():
    parser = argparse.ArgumentParser(description="Run and plot a firing-plan search")
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="YAML file with an `engine` node (default: config/config.yaml)",
    )
    parser.add_argument(
        "--output-folder", default="plots", help="Where to write figures (default: plots)"
    )
    parser.add_argument(
        "--generations", type=int, nargs="+", help="Generations to draw"
    )
    parser.add_argument("--seed", type=int, help="Override the configured seed")
    parser.add_argument("--no-csv", action="store_true", help="Skip CSV export")
    args = parser.parse_args()

    output_folder = Path(args.output_folder)
    output_folder.mkdir(parents=True, exist_ok=True)

    cfg = OmegaConf.load(args.config)
    engine_cfg = OmegaConf.to_container(cfg.engine, resolve=True)
    if args.seed is not None:
        engine_cfg["seed"] = args.seed

    history = HistoryTracker()
    engine = EvolutionEngine(engine_cfg, trackers=[LoguruTracker(every=10), history])
    result = engine.run()
    logger.info(
        f"Run finished: {result.reason.value} after {result.generations} generations, "
        f"best {result.best_individual} at generation {result.found_at_generation}"
    )

    plotter = RunPlotter(engine.config.wall, engine.config.gravity)
    plotter.plot_trajectories(
        _pick_generations(history, args.generations),
        output_folder / "trajectories.png",
    )
    plotter.plot_fitness(history, output_folder / "fitness.png")
    if not args.no_csv:
        history.to_csv(output_folder / "history.csv")


if __name__ == "__main__":
    main()
