import logging
import time
from dataclasses import dataclass, asdict
from typing import Optional

from perfect_maze.core.maze import Maze, GenTactic
from perfect_maze.core.rand import SeededRandom
from perfect_maze.core.analysis import MazeAnalyzer

logger = logging.getLogger(__name__)

def setup_logging(verbose: bool):
    """Root logger setup for scripts. Library code only creates module loggers."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

@dataclass
class GenerationConfig:
    """
    Settings for one generate() run.
    verbose is for the caller to hand to setup_logging(); generate() itself
    never configures logging.
    """
    width: int = 21
    height: int = 21
    tactic: str = "dfs"
    seed: Optional[int] = None
    verbose: bool = False

    def __post_init__(self):
        # Fail early on a typo rather than halfway through a run
        self.tactic = GenTactic(self.tactic).value

def generate(config: GenerationConfig) -> Maze:
    rng = SeededRandom(config.seed)
    maze = Maze(config.width, config.height)

    logger.info(f"Generating {maze.width}x{maze.height} maze with {config.tactic.upper()} (seed={rng.seed})...")
    logger.debug(f"Config: {asdict(config)}")

    t0 = time.time()
    maze.gen(config.tactic, rng)
    logger.info(f"Generation complete in {time.time() - t0:.4f}s")

    stats = MazeAnalyzer.calculate_stats(maze)
    logger.info(f"Stats: {stats}")
    return maze
