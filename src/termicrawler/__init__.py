"""TermiCrawler -- a typing-driven dungeon crawler engine.

The two engines are the seeded dungeon generator
(:mod:`termicrawler.dungeon`) and the turn-based battle system
(:mod:`termicrawler.battle`).  :mod:`termicrawler.game` drives them as a
headless session and :mod:`termicrawler.sim` plays sessions with agents.
"""

__version__ = "0.1.0"
