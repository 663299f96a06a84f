"""Headless simulation of TermiCrawler battles and runs."""

from termicrawler.sim.play_agents import PlayAgent, RandomTypist
from termicrawler.sim.runner import BattleRunner, RunSimulator
from termicrawler.sim.telemetry import BattleTelemetry, RunTelemetry

__all__ = [
    "PlayAgent",
    "RandomTypist",
    "BattleRunner",
    "RunSimulator",
    "BattleTelemetry",
    "RunTelemetry",
]
