"""Tests for the command-line scripts."""

from fecore.quadrature import generate
from fecore.reference_elements import ElemType
from fecore.scripts.check_quadrature import check_exactness, check_quadrature
from fecore.scripts.plot_hermite_basis import plot_hermite_basis
from fecore.scripts.tabulate_quadrature import quadrature_table, tabulate_quadrature
import numpy as np
import pandas as pd
import pytest
import sys


def test_quadrature_table():
    rule = generate(2, ElemType.TRI3, 3)
    table = quadrature_table(rule)

    assert list(table.columns) == ["x", "y", "weight"]
    assert len(table) == rule.n_points()
    assert np.isclose(table["weight"].sum(), 0.5)


def test_tabulate_quadrature(tmp_path, monkeypatch):
    path = tmp_path / "rules" / "hex.csv"
    monkeypatch.setattr(sys, "argv", ["tabulate", "HEX8", "3", "--output", str(path)])

    tabulate_quadrature()

    table = pd.read_csv(path)
    assert list(table.columns) == ["x", "y", "z", "weight"]
    assert len(table) == 8


def test_check_exactness():
    table = check_exactness(ElemType.PRISM6, 4)

    assert list(table["order"]) == [0, 1, 2, 3, 4]
    assert np.allclose(table["weight_sum"], 1.0)
    assert (table["max_error"] < 1e-12).all()


def test_check_quadrature_defaults(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["check", "--max-order", "2"])

    with pytest.raises(SystemExit) as exit_info:
        check_quadrature()

    assert exit_info.value.code == 0
    assert capsys.readouterr().out.count("weight_sum") == 7


def test_check_quadrature_selected_types(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["check", "EDGE3", "TRI6", "--max-order", "3"])

    with pytest.raises(SystemExit) as exit_info:
        check_quadrature()

    assert exit_info.value.code == 0


def test_check_quadrature_invalid_type(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["check", "TRIANGLE"])

    with pytest.raises(SystemExit) as exit_info:
        check_quadrature()

    assert exit_info.value.code == 2


def test_plot_hermite_basis(tmp_path, monkeypatch):
    path = tmp_path / "basis.png"
    monkeypatch.setattr(
        sys, "argv", ["plot", "0.0", "2.0", "--points", "11", "--output", str(path)]
    )

    plot_hermite_basis()

    assert path.exists()
