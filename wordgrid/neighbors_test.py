import pytest
from inline_snapshot import snapshot

from wordgrid.neighbors import NEIGHBORS, init_neighbors


def test_neighbors44():
    ns = NEIGHBORS[(4, 4)]
    assert len(ns) == 16
    assert ns[0] == [1, 4, 5]
    assert ns[5] == [0, 1, 2, 4, 6, 8, 9, 10]
    assert ns[15] == [10, 11, 14]
    assert [len(n) for n in ns] == snapshot(
        [3, 5, 5, 3, 5, 8, 8, 5, 5, 8, 8, 5, 3, 5, 5, 3]
    )


@pytest.mark.parametrize("dims", [(4, 4), (3, 5), (1, 4)])
def test_neighbors_symmetric(dims):
    ns = init_neighbors(*dims)
    assert len(ns) == dims[0] * dims[1]
    for i, n in enumerate(ns):
        assert i not in n
        assert n == sorted(n)
        for j in n:
            assert i in ns[j], (dims, i, j)


def test_neighbors_rectangular():
    # 0 1 2
    # 3 4 5
    ns = init_neighbors(2, 3)
    assert ns == [
        [1, 3, 4],
        [0, 2, 3, 4, 5],
        [1, 4, 5],
        [0, 1, 4],
        [0, 1, 2, 3, 5],
        [1, 2, 4],
    ]
