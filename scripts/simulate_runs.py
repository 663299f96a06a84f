"""Simulate TermiCrawler runs with the random typist and print a summary.

Usage:
    python scripts/simulate_runs.py [--runs 200] [--floors 5] [--seed 42]
"""

from __future__ import annotations

import argparse
import logging
import time
from collections import Counter

from termicrawler.core.rng import GameRNG
from termicrawler.game.config import GameConfig
from termicrawler.sim.play_agents.random_agent import RandomTypist
from termicrawler.sim.runner import RunSimulator


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate TermiCrawler runs")
    parser.add_argument("--runs", type=int, default=200, help="Number of runs")
    parser.add_argument("--floors", type=int, default=5, help="Floors to clear per run")
    parser.add_argument("--moves", type=int, default=2000, help="Move attempts per run")
    parser.add_argument("--seed", type=int, default=42, help="Base seed")
    parser.add_argument("--encounter-rate", type=float, default=0.05, help="Random encounter chance per step")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log warnings from the engines")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING if args.verbose else logging.ERROR)

    config = GameConfig(encounter_rate=args.encounter_rate)

    print(f"Running {args.runs:,} simulated runs ({args.floors} floors each)...")
    t0 = time.perf_counter()
    results = []
    for i in range(args.runs):
        seed = args.seed + i
        agent = RandomTypist(rng=GameRNG(seed).fork("agent"))
        results.append(RunSimulator(agent, config).run(seed, max_floors=args.floors, max_moves=args.moves))
    elapsed = time.perf_counter() - t0
    print(f"Done in {elapsed:.1f}s")
    print()

    outcomes = Counter(r.final_result for r in results)
    battles = [b for r in results for b in r.battles]
    won = [b for b in battles if b.result == "win"]

    print(f"Outcomes:        {dict(outcomes)}")
    print(f"Mean floor:      {sum(r.floors_reached for r in results) / len(results):.2f}")
    print(f"Mean level:      {sum(r.final_level for r in results) / len(results):.2f}")
    print(f"Battles fought:  {len(battles):,} ({len(won):,} won)")
    if battles:
        print(f"Mean turns:      {sum(b.turns for b in battles) / len(battles):.2f}")
        print(f"Mean HP lost:    {sum(b.hp_lost for b in battles) / len(battles):.2f}")
        print(f"Crit rate:       {sum(b.critical_hits for b in battles) / max(1, sum(b.turns for b in battles)):.3f}")
    purchases = Counter(p for r in results for p in r.purchases)
    print(f"Purchases:       {dict(purchases)}")


if __name__ == "__main__":
    main()
