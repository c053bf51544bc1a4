import json

import pandas as pd
import pytest

from chart_builder.io_utils import load_points, frame_to_points, attribute_keys, write_text


def test_load_json_records_missing_keys_become_none(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([
        {"source": "A", "overall": 10, "dem": 4.5},
        {"source": "B", "overall": 3},
    ]), encoding="utf-8")
    points = load_points(path)
    assert [p["source"] for p in points] == ["A", "B"]
    assert points[0]["dem"] == 4.5
    assert points[1]["dem"] is None
    assert attribute_keys(points) == ["overall", "dem"]


def test_load_csv_blank_cells_and_header_spaces(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("source, overall ,dem\nA,10,\nB,3,7\n", encoding="utf-8")
    points = load_points(path)
    assert points[0] == {"source": "A", "overall": 10, "dem": None}
    assert points[1]["dem"] == 7


def test_numeric_looking_source_stays_string(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("source,overall\n2024,1\n", encoding="utf-8")
    assert load_points(path)[0]["source"] == "2024"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_points(tmp_path / "nope.json")


def test_duplicate_source_raises():
    df = pd.DataFrame([{"source": "A", "overall": 1}, {"source": "A", "overall": 2}])
    with pytest.raises(ValueError, match="Duplicate"):
        frame_to_points(df)


def test_missing_source_column_raises():
    with pytest.raises(ValueError):
        frame_to_points(pd.DataFrame([{"name": "A", "overall": 1}]))


def test_layout_columns_are_dropped():
    points = frame_to_points(pd.DataFrame([{"source": "A", "overall": 1, "x": 5, "y": 6}]))
    assert points == [{"source": "A", "overall": 1}]


def test_write_text_creates_parents(tmp_path):
    path = tmp_path / "a" / "b" / "page.html"
    write_text(path, "hi")
    assert path.read_text(encoding="utf-8") == "hi"
