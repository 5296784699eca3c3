import pytest

from crime_data import (
    build_crime_tree,
    crime_points,
    iter_crime_records,
    load_dataset,
    preprocess_dataset,
)

HEADER = "X,Y,Time,Street,Offense,Date,Tract,Lat,Long"
ROWS = [
    "1380807.0,410413.0,1.0,829 E WARRINGTON AVE,robbery,1/1/1990,1803,40.41969,-79.98831",
    "abc,403946.0,1.0,1900 WOODWARD AVE,aggravated assault,1/1/1990,2002,40.40082,-80.07979",
    "1357605.0,411966.0,1.0,116 FRANKSTOWN AVE,robbery,1/1/1990,1013,40.42313,-80.07364",
    "1359700.0,inf,2.0,3400 BLVD OF THE ALLIES,larceny,1/1/1990,402,40.43741,-79.96373",
    ",414000.0,2.0,3400 BLVD OF THE ALLIES,larceny,1/1/1990,402,40.43741,-79.96373",
]


@pytest.fixture
def crime_csv(tmp_path):
    path = tmp_path / "crimes.csv"
    path.write_text("\n".join([HEADER] + ROWS) + "\n", encoding="utf-8")
    return path


def test_bad_rows_are_skipped(crime_csv, capsys):
    df = preprocess_dataset(load_dataset(crime_csv))
    out = capsys.readouterr().out

    assert len(df) == 2
    assert "[DATA] Raw rows: 5" in out
    assert "[DATA] Skipped 3 rows with unparseable coordinates" in out
    assert list(df["crime_data"]) == [ROWS[0], ROWS[2]]


def test_records_and_tree(crime_csv):
    df = preprocess_dataset(load_dataset(crime_csv))
    records = list(iter_crime_records(df))
    assert records[0] == (1380807.0, 410413.0, ROWS[0])
    assert records[1] == (1357605.0, 411966.0, ROWS[2])

    tree, build_time = build_crime_tree(df)
    assert build_time >= 0
    assert len(tree) == 2
    assert tree.pre_order() == [ROWS[0], ROWS[2]]
    assert crime_points(df).shape == (2, 2)


def test_single_column_file_is_rejected(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("X\n1\n2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        preprocess_dataset(load_dataset(path))


def test_bundled_sample_loads():
    df = preprocess_dataset(load_dataset())
    tree, _ = build_crime_tree(df)
    assert len(tree) == len(df) == 10
    nearest = tree.nearest_neighbor(1358000.0, 413000.0)
    assert "ATWOOD" in nearest.payload
