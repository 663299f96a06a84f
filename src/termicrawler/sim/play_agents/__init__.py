"""Play agents for headless simulation."""

from termicrawler.sim.play_agents.base import PlayAgent
from termicrawler.sim.play_agents.random_agent import RandomTypist

__all__ = ["PlayAgent", "RandomTypist"]
