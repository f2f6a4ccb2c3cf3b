def init_neighbors(num_rows: int, num_cols: int) -> list[list[int]]:
    """Map each row-major cell index to the indices of its 8-neighbors.

    Neighbor lists are sorted, i.e. in grid scan order.
    """

    def idx(row: int, col: int):
        return num_cols * row + col

    def pos(idx: int):
        return (idx // num_cols, idx % num_cols)

    ns: list[list[int]] = []
    for i in range(0, num_rows * num_cols):
        row, col = pos(i)
        n = []
        for dr in range(-1, 2):
            r = row + dr
            if r < 0 or r >= num_rows:
                continue
            for dc in range(-1, 2):
                c = col + dc
                if c < 0 or c >= num_cols:
                    continue
                if dr == 0 and dc == 0:
                    continue
                n.append(idx(r, c))
        n.sort()
        ns.append(n)
    return ns


NEIGHBORS44 = init_neighbors(4, 4)

NEIGHBORS = {
    (4, 4): NEIGHBORS44,
}
