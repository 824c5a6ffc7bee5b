"""
slide and merge sweep for a single row or column

every line is handled as a numpy view ordered so that index 0 is the
edge the blocks are pushed toward, so one routine covers all four
directions
"""


def line_views(grid, direction):
    """
    writable views into every row or column of the grid

    args:
        grid: NxN numpy array
        direction: 'left', 'right', 'up' or 'down'
    """
    size = grid.shape[0]
    if direction == 'left':
        return [grid[i, :] for i in range(size)]
    if direction == 'right':
        return [grid[i, ::-1] for i in range(size)]
    if direction == 'up':
        return [grid[:, j] for j in range(size)]
    if direction == 'down':
        return [grid[::-1, j] for j in range(size)]
    raise ValueError(f"Unknown direction: {direction}")


def resolve_line(line):
    """
    push the blocks of one line toward index 0, in place

    a fence walks from index 0 to N-2; at each position the nearest
    block is slid into the fence and the next block behind it is either
    pulled in, merged with the fence block or placed right behind it.
    a merged block sits on a fence that is never revisited, so every
    block merges at most once per push

    returns:
        moved: whether any block changed position or value
        points: sum of the merged (doubled) values
        merges: number of merges, i.e. cells freed
    """
    size = len(line)
    moved = False
    points = 0
    merges = 0

    for fence in range(size - 1):
        near = fence
        while near < size - 2 and line[near] == 0:
            near += 1
        far = near + 1
        while far < size - 1 and line[far] == 0:
            far += 1

        # slide
        if near != fence and line[near] != 0:
            line[fence], line[near] = line[near], 0
            moved = True

        if line[fence] == 0 or line[far] == 0:
            if line[far] != 0:
                moved = True
            line[fence] += line[far]
            line[far] = 0
            continue

        # merge
        if line[fence] == line[far]:
            line[fence] <<= 1
            line[far] = 0
            points += int(line[fence])
            merges += 1
            moved = True
            continue

        if far != fence + 1:
            line[fence + 1], line[far] = line[far], 0
            moved = True

    return moved, points, merges


def resolve_grid(grid, direction):
    """
    apply the sweep to every line of the grid in the given direction

    returns (moved, points, merges) summed over all lines
    """
    moved = False
    points = 0
    merges = 0
    for line in line_views(grid, direction):
        line_moved, line_points, line_merges = resolve_line(line)
        moved = moved or line_moved
        points += line_points
        merges += line_merges
    return moved, points, merges
