from pathlib import Path
import yaml

from astar_grid.core.grid import validate_grid
from astar_grid.utils.cli.commands import get_grid


def test_grids_yaml_schema():
    path = Path('astar_grid/data/grids.yaml')
    assert path.is_file(), 'grids.yaml file missing'

    with open(path, 'r', encoding='utf-8') as fh:
        data = yaml.safe_load(fh)

    assert isinstance(data, dict)
    for name in ('maze', 'visualizer', 'corner', 'diagonal'):
        assert name in data

    for name, grid in data.items():
        validate_grid(grid)
        assert all(cell in (0, 1) for row in grid for cell in row)


def test_get_grid_returns_copy():
    grid = get_grid('corner')
    assert grid == [[0, 0], [1, 0]]
    grid[0][0] = 1
    assert get_grid('corner') == [[0, 0], [1, 0]]
