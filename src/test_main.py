import numpy as np
import pytest

from main import DriverConfig, read_floats, run_menu
from two_d_tree import TwoDTree


def scripted(*answers):
    it = iter(answers)
    return lambda prompt="": next(it)


def small_tree():
    tree = TwoDTree()
    for x, y, name in [(0, 0, "A"), (5, 5, "B"), (-3, 2, "C"), (1, -1, "D")]:
        tree.insert(x, y, name)
    return tree


def test_read_floats():
    assert read_floats(" 1 2.5  -3 4 ", 4) == [1.0, 2.5, -3.0, 4.0]
    with pytest.raises(ValueError):
        read_floats("1 2 3", 4)
    with pytest.raises(ValueError):
        read_floats("1 two", 2)
    for answer in ("nan 1", "0 inf", "-inf nan"):
        with pytest.raises(ValueError):
            read_floats(answer, 2)


def test_menu_session(tmp_path, capsys):
    tree = small_tree()
    points = np.array([[0, 0], [5, 5], [-3, 2], [1, -1]], dtype=float)
    config = DriverConfig(kml_path=tmp_path / "out.kml", demo_rect=(-4, -2, 2, 2), demo_query=(0.1, 0.1))

    run_menu(
        tree,
        points,
        config,
        input_fn=scripted(
            "2",
            "6", "-4 -2 2 2",
            "6", "2 2 -4 -2",
            "7", "0.1 0.1",
            "7", "oops",
            "9",
            "42",
            "8",
        ),
    )
    out = capsys.readouterr().out

    assert "A\nC\nD\nFound 3 crimes." in out
    assert "Invalid rectangle" in out
    assert "Looked at 4 nodes in tree. Found the nearest crime at:\nA" in out
    assert "Invalid input" in out
    assert "Nodes examined : 4 of 4" in out
    assert "Invalid option" in out
    assert "Thank you for exploring" in out
    assert (tmp_path / "out.kml").exists()


def test_menu_empty_tree_and_eof(capsys):
    def eof_after_seven():
        answers = iter(["7", "1 1"])

        def read(prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        return read

    run_menu(TwoDTree(), np.empty((0, 2)), DriverConfig(), input_fn=eof_after_seven())
    out = capsys.readouterr().out
    assert "The tree is empty" in out
    assert "Thank you for exploring" in out


def test_menu_survives_nan_query_and_unwritable_kml(tmp_path, capsys):
    config = DriverConfig(kml_path=tmp_path / "missing" / "out.kml")

    run_menu(
        small_tree(),
        np.empty((0, 2)),
        config,
        input_fn=scripted(
            "7", "nan nan",
            "6", "-4 -2 2 2",
            "7", "0.1 0.1",
            "8",
        ),
    )
    out = capsys.readouterr().out

    assert "Invalid input: Expected finite numbers" in out
    #ta apotelesmata tipononte prin apotixei to KML
    assert "A\nC\nD\nFound 3 crimes." in out
    assert "[KML] Error writing KML file" in out
    assert "has been written to" not in out
    assert "Looked at 4 nodes in tree. Found the nearest crime at:\nA" in out
    assert "Thank you for exploring" in out
    assert not (tmp_path / "missing").exists()
