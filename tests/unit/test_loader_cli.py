"""Tests for CSV loading and the distribute command."""

import pandas as pd
import pytest
from openpyxl import load_workbook

from histobook.analytics.distributor import Distributor
from histobook.cli import main
from histobook.data.loader import load_values, distribute_frame

from .conftest import SERIES1, SERIES2, SERIES1_BUCKETS, SERIES2_BUCKETS


@pytest.fixture
def values_csv(tmp_path):
    rows = [("series2", v) for v in SERIES2] + [("series1", v) for v in SERIES1]
    df = pd.DataFrame(rows, columns=["series", "value"])
    path = tmp_path / "values.csv"
    df.to_csv(path, index=False)
    return path


def test_load_values_drops_unusable_rows(tmp_path):
    path = tmp_path / "messy.csv"
    path.write_text("series,value,extra\na,0.5,x\nb,,y\nc,oops,z\n,0.2,w\n")
    df = load_values(path)
    assert list(df.columns) == ["series", "value"]
    assert df["series"].tolist() == ["a"]


def test_load_values_missing_column(tmp_path):
    path = tmp_path / "wrong.csv"
    path.write_text("name,score\na,1\n")
    with pytest.raises(KeyError, match="series, value"):
        load_values(path)


def test_distribute_frame(values_csv):
    dist = distribute_frame(load_values(values_csv), Distributor(0.0, 1.0, 10))
    assert dist.series_names() == ["series1", "series2"]
    assert dist.get_buckets("series1").tolist() == SERIES1_BUCKETS
    assert dist.get_buckets("series2").tolist() == SERIES2_BUCKETS


def test_numeric_series_names_kept_as_text(tmp_path):
    path = tmp_path / "nums.csv"
    path.write_text("series,value\n01,0.1\n2,0.9\n")
    dist = distribute_frame(load_values(path), Distributor(0.0, 1.0, 2))
    assert dist.series_names() == ["01", "2"]


def test_cli_distribute_workbook(values_csv, tmp_path, capsys):
    out = tmp_path / "dist.xlsx"
    rc = main(["distribute", str(values_csv), "--min", "0", "--max", "1", "--buckets", "10",
               "--output", str(out)])
    assert rc == 0
    ws = load_workbook(out)["Distribution"]
    assert [c.value for c in ws[1]] == ["bucket_min", "series1", "series2"]
    printed = capsys.readouterr().out
    assert "series1" in printed
    assert str(out) in printed


def test_cli_distribute_csv(values_csv, tmp_path):
    out = tmp_path / "dist.csv"
    rc = main(["distribute", str(values_csv), "--min", "0", "--max", "1", "--buckets", "10",
               "--output", str(out), "--csv"])
    assert rc == 0
    assert pd.read_csv(out)["series1"].tolist() == SERIES1_BUCKETS


def test_cli_rejects_bad_parameters(values_csv, capsys):
    rc = main(["distribute", str(values_csv), "--min", "1", "--max", "0", "--buckets", "10"])
    assert rc == 2
    assert "Minimum of range" in capsys.readouterr().err


def test_cli_rejects_values_below_minimum(values_csv, capsys):
    rc = main(["distribute", str(values_csv), "--min", "0.5", "--max", "1", "--buckets", "5"])
    assert rc == 2
    assert "below the distribution minimum" in capsys.readouterr().err


def test_cli_without_command_prints_help(capsys):
    assert main([]) == 0
    assert "distribute" in capsys.readouterr().out


def test_cli_reports_unwritable_output(values_csv, tmp_path, capsys):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x")
    for extra in ([], ["--csv"]):
        rc = main(["distribute", str(values_csv), "--min", "0", "--max", "1", "--buckets", "10",
                   "--output", str(blocker / "dist.out"), *extra])
        assert rc == 2
        assert "ERROR" in capsys.readouterr().err


def test_cli_rejects_reserved_series_name(tmp_path, capsys):
    path = tmp_path / "reserved.csv"
    path.write_text("series,value\nbucket_min,0.5\n")
    rc = main(["distribute", str(path), "--min", "0", "--max", "1", "--buckets", "10"])
    assert rc == 2
    assert "reserved" in capsys.readouterr().err
