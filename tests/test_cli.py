"""Tests for the command-line entry point."""

import pytest

from ga_tsp.cli import main


def test_run_on_points_file(tmp_path, capsys):
    path = tmp_path / "square.txt"
    path.write_text("0 0\n1 0\n1 1\n0 1\n")
    main(["run", "--points", str(path), "--population-size", "20", "--generations", "30", "--seed", "4"])
    out = capsys.readouterr().out
    assert "loaded 4 points" in out
    assert "best open path length: 3.0000" in out


def test_run_closed_on_random_cities(capsys):
    main(["run", "--random", "8", "--generations", "3", "--seed", "1", "--closed", "--report-every", "1"])
    out = capsys.readouterr().out
    assert "gen 3:" in out
    assert "best closed tour length:" in out


def test_invalid_input_exits_with_status_2(tmp_path, capsys):
    path = tmp_path / "dupes.txt"
    path.write_text("0 0\n0 0\n")
    with pytest.raises(SystemExit) as exc:
        main(["run", "--points", str(path)])
    assert exc.value.code == 2
    assert "Duplicate point" in capsys.readouterr().err


def test_invalid_config_exits_with_status_2(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["run", "--random", "5", "--population-size", "1"])
    assert exc.value.code == 2
    assert "population_size" in capsys.readouterr().err


def test_data_lists_instances(tmp_path, capsys):
    main(["data", "--data-root", str(tmp_path)])
    assert "No TSPLIB instances found" in capsys.readouterr().out


def test_data_lists_instance_with_optimum(tsplib_root, capsys):
    main(["data", "--data-root", str(tsplib_root)])
    assert "square4: 4 cities, optimum=40" in capsys.readouterr().out


def test_run_on_tsplib_reports_gap(tsplib_root, capsys):
    main(["run", "--tsp", str(tsplib_root / "square4.tsp"), "--closed", "--population-size", "20",
          "--generations", "30", "--seed", "2"])
    out = capsys.readouterr().out
    assert "loaded TSPLIB instance square4" in out
    assert "optimum: 40.0000 gap: 0.00%" in out


def test_malformed_tsplib_exits_with_status_2(tmp_path, capsys):
    path = tmp_path / "broken.tsp"
    path.write_text("NAME : broken\nTYPE : TSP\nDIMENSION : 1\nEDGE_WEIGHT_TYPE : EUC_2D\nNODE_COORD_SECTION\n1 a b\n")
    with pytest.raises(SystemExit) as exc:
        main(["run", "--tsp", str(path)])
    assert exc.value.code == 2
    assert "malformed TSPLIB instance" in capsys.readouterr().err
