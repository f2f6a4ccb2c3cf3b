from wordgrid.prefix_cache import PrefixCache, improves
from wordgrid.tile import ATTR_DOUBLE_LETTER, ATTR_NONE, Tile


def total(tiles):
    return sum(t.value for t in tiles)


def make_tiles(word: str, attributes=None):
    attributes = attributes or [ATTR_NONE] * len(word)
    return [Tile(let, attr, (0, i), i) for i, (let, attr) in enumerate(zip(word, attributes))]


def test_improves():
    assert improves(5, 6)
    assert not improves(6, 6)
    assert not improves(6, 5)


def test_empty():
    root = PrefixCache()
    assert root.tiles == ()
    assert root.score == 0
    assert root.num_nodes() == 1
    assert root.find_node("") is root
    assert root.find_node("a") is None


def test_add_word():
    root = PrefixCache()
    c, a, t = tiles = make_tiles("cat")
    root.add_word("cat", tiles, total)

    assert root.num_nodes() == 4
    assert root.prefixes() == {"c": 4, "ca": 5, "cat": 6}
    node = root.find_node("ca")
    assert node is not None
    assert node.tiles == (c, a)
    assert node.score == 5
    assert root.find_node("cat").tiles == (c, a, t)
    assert root.find_node("cab") is None
    assert root.find_node("cats") is None

    root.add_word("cab", make_tiles("cab"), total)
    assert root.num_nodes() == 5
    assert root.find_node("cab").score == 9


def test_insert_if_better():
    root = PrefixCache()
    plain = make_tiles("at")
    doubled = make_tiles("at", [ATTR_DOUBLE_LETTER, ATTR_NONE])

    root.add_word("at", plain, total)
    assert root.find_node("at").score == 2

    root.add_word("at", doubled, total)
    assert root.find_node("a").tiles == (doubled[0],)
    assert root.find_node("at").score == 3

    # A lower-scoring path doesn't replace what's there.
    root.add_word("at", plain, total)
    assert root.find_node("at").tiles == tuple(doubled)
    assert root.find_node("at").score == 3
