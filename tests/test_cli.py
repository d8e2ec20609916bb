"""
Testes da linha de comando (relsort connections | sort).
"""

import pandas as pd

from cli.main import main


class TestConnectionsCommand:
    """Subcomando connections."""

    def test_prints_table(self, osm_file, capsys):
        assert main(["connections", "--in", str(osm_file), "--relation", "100"]) == 0
        out = capsys.readouterr().out
        assert "symbol" in out
        assert "Rua A" in out

    def test_sorted_and_csv(self, osm_file, tmp_path):
        csv_path = tmp_path / "ligacoes.csv"
        code = main([
            "connections", "--in", str(osm_file), "--relation", "100",
            "--sorted", "--csv", str(csv_path),
        ])
        assert code == 0
        table = pd.read_csv(csv_path, keep_default_na=False)
        assert table["id"].tolist() == [5, 12, 11, 10, 999, 200]
        assert table["symbol"].tolist() == ["I", "FPH FORWARD", "FORWARD", "BACKWARD", "NONE", "I"]

    def test_missing_file(self, tmp_path):
        assert main(["connections", "--in", str(tmp_path / "nada.osm"), "--relation", "1"]) == 1

    def test_missing_relation(self, osm_file):
        assert main(["connections", "--in", str(osm_file), "--relation", "7"]) == 1

    def test_broken_file(self, tmp_path):
        path = tmp_path / "quebrado.osm"
        path.write_text("<osm><way id='1'>", encoding="utf-8")
        assert main(["connections", "--in", str(path), "--relation", "1"]) == 2


class TestSortCommand:
    """Subcomando sort."""

    def test_prints_new_order(self, osm_file, capsys):
        assert main(["sort", "--in", str(osm_file), "--relation", "100", "--log-level", "DEBUG"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("   0 | node 5")
        assert lines[1].startswith("   1 | way 12")
        assert lines[-1] == "Total de membros: 6"
