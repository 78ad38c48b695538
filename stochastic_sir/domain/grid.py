"""Orthogonal random walk on a bounded 2D grid.

Edge handling follows ``BoundaryPolicy``:

- WRAP: toroidal grid, every cell has up to 4 distinct neighbours.
- CLAMP: only in-bound neighbours are candidates, so edge cells have 2 or 3.
- REFLECT: a direction is picked among the 4, skipping axes only one cell
  long; an off-grid move bounces to the opposite neighbour on that axis.

Multiple agents may share a cell.
"""

from __future__ import annotations

from stochastic_sir.config.types import BoundaryPolicy, GridConfig
from stochastic_sir.domain.agent import Agent
from stochastic_sir.domain.random_source import RandomSource
from stochastic_sir.errors import InvalidArgumentError

DIRECTIONS: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))
"""Von Neumann moves in a fixed order: up, right, down, left."""


def neighbor_cells(x: int, y: int, bounds: GridConfig) -> list[tuple[int, int]]:
    """Return candidate destination cells for WRAP and CLAMP policies.

    Deduplicates wrapped cells, which collide on grids narrower than 3 cells,
    and never includes the origin.
    """
    seen: set[tuple[int, int]] = set()
    cells: list[tuple[int, int]] = []
    for dx, dy in DIRECTIONS:
        nx_, ny_ = x + dx, y + dy
        if bounds.boundary is BoundaryPolicy.WRAP:
            nx_, ny_ = nx_ % bounds.width, ny_ % bounds.height
        elif not bounds.contains(nx_, ny_):
            continue
        cell = (nx_, ny_)
        if cell == (x, y) or cell in seen:
            continue
        seen.add(cell)
        cells.append(cell)
    return cells


def _reflect(value: int, delta: int, size: int) -> int:
    target = value + delta
    if 0 <= target < size:
        return target
    target = value - delta
    if 0 <= target < size:
        return target
    return value


def random_walk(agent: Agent, bounds: GridConfig, source: RandomSource) -> tuple[int, int]:
    """Move ``agent`` one orthogonal step and return its new position."""
    if agent.x is None or agent.y is None:
        raise InvalidArgumentError(f"agent {agent.agent_id} has no grid position")
    if not bounds.contains(agent.x, agent.y):
        raise InvalidArgumentError(
            f"agent {agent.agent_id} at ({agent.x}, {agent.y}) is outside the grid"
        )

    if bounds.boundary is BoundaryPolicy.REFLECT:
        # a one-cell axis has no neighbour to move or bounce to
        moves = [(dx, dy) for dx, dy in DIRECTIONS if (bounds.width if dx else bounds.height) > 1]
        if not moves:
            return agent.x, agent.y
        dx, dy = source.choice(moves)
        agent.x = _reflect(agent.x, dx, bounds.width)
        agent.y = _reflect(agent.y, dy, bounds.height)
    else:
        cells = neighbor_cells(agent.x, agent.y, bounds)
        if cells:
            agent.x, agent.y = source.choice(cells)
    return agent.x, agent.y


def random_positions(n: int, bounds: GridConfig, source: RandomSource) -> list[tuple[int, int]]:
    """Sample ``n`` distinct cells uniformly from the grid."""
    all_positions = [(x, y) for x in range(bounds.width) for y in range(bounds.height)]
    if n > len(all_positions):
        raise InvalidArgumentError(f"cannot place {n} agents on {len(all_positions)} cells")
    return source.sample(all_positions, n)
