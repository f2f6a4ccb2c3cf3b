import pytest
from inline_snapshot import snapshot

from wordgrid.find_words import find_all_words, main
from wordgrid.test_utils import PLAIN_BOARD, get_plain_board

WORDS = ["leap", "pearl", "lope", "aloe", "", "sea", "dew", "held", "zoo", "a"]


@pytest.fixture
def dictionary(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n")
    return str(path)


def test_find_all_words():
    matches = find_all_words(get_plain_board(), WORDS)
    # Ties keep dictionary order.
    assert [(m.word, m.score) for m in matches] == snapshot(
        [("held", 8), ("leap", 7), ("lope", 7), ("dew", 7), ("aloe", 4), ("sea", 3)]
    )


def test_main(dictionary, capsys):
    main([PLAIN_BOARD, "--dictionary", dictionary])
    out, err = capsys.readouterr()
    assert out.splitlines() == snapshot(
        [
            "held score:8 tiles:(3, 2), (2, 1), (3, 1), (3, 0)",
            "leap score:7 tiles:(3, 1), (2, 1), (1, 0), (0, 1)",
            "lope score:7 tiles:(0, 0), (1, 1), (0, 1), (0, 2)",
            "dew score:7 tiles:(3, 0), (2, 1), (2, 0)",
            "aloe score:4 tiles:(1, 0), (0, 0), (1, 1), (0, 2)",
            "sea score:3 tiles:(2, 3), (2, 2), (1, 2)",
        ]
    )
    assert "6 words found" in err
    assert "prefix cache" not in err


def test_main_options(dictionary, capsys):
    layout = "T . . . . . . . . . . . . . . ."
    main(
        [
            PLAIN_BOARD.upper(),
            "--dictionary",
            dictionary,
            "--attributes",
            layout,
            "--limit",
            "2",
            "--prefix_cache",
            "--k_prefix",
            "0",
        ]
    )
    out, err = capsys.readouterr()
    # The triple-word "l" in the corner makes "lope" the best word.
    assert out.splitlines() == [
        "lope score:21 tiles:(0, 0), (1, 1), (0, 1), (0, 2)",
        "aloe score:12 tiles:(1, 0), (0, 0), (1, 1), (0, 2)",
    ]
    assert "prefix cache" in err


def test_main_bad_board(dictionary):
    with pytest.raises(SystemExit):
        main(["lpef", "--dictionary", dictionary])
    with pytest.raises(SystemExit):
        main([PLAIN_BOARD, "--dictionary", dictionary, "--attributes", "d d d"])


def test_search_budget_skips_word(dictionary, capsys):
    main([PLAIN_BOARD, "--dictionary", dictionary, "--max_nodes", "2"])
    out, err = capsys.readouterr()
    assert "Skipping" in err
    assert "sea score:3 tiles:(2, 3), (2, 2), (1, 2)" in out.splitlines()
