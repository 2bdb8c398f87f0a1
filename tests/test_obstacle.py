from invaders.obstacle import GRID, Obstacle
from invaders.shapes import BLOCK_SIZE, Block, Rect


def test_block_count_matches_filled_cells():
    obstacle = Obstacle(100, 500)
    assert len(obstacle.blocks) == sum(sum(row) for row in GRID)


def test_width_spans_grid_columns():
    assert Obstacle.width() == len(GRID[0]) * BLOCK_SIZE


def test_blocks_lie_within_obstacle_bounds():
    obstacle = Obstacle(100, 500)
    height = len(GRID) * BLOCK_SIZE
    for block in obstacle.blocks:
        assert 100 <= block.x <= 100 + Obstacle.width() - BLOCK_SIZE
        assert 500 <= block.y <= 500 + height - BLOCK_SIZE


def test_empty_corner_has_no_block():
    obstacle = Obstacle(100, 500)
    assert Block(100.0, 500.0) not in obstacle.blocks
    assert Block(100.0 + 4 * BLOCK_SIZE, 500.0) in obstacle.blocks


def test_remove_hits_removes_only_overlapping_blocks():
    obstacle = Obstacle(100, 500)
    before = len(obstacle.blocks)
    shot = Rect(130, 500, 4, 15)
    removed = obstacle.remove_hits(shot)
    assert removed > 0
    assert len(obstacle.blocks) == before - removed
    assert not any(block.rect().collides(shot) for block in obstacle.blocks)


def test_remove_hits_with_miss_removes_nothing():
    obstacle = Obstacle(100, 500)
    before = list(obstacle.blocks)
    assert obstacle.remove_hits(Rect(0, 0, 4, 15)) == 0
    assert obstacle.blocks == before