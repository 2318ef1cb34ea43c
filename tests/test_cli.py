import pytest

from graphkit.cli import demo_directed, demo_unweighted, main


def _lines(capsys) -> list[str]:
    return capsys.readouterr().out.splitlines()


def test_demo_unweighted_reports_edges_and_cycle(capsys):
    demo_unweighted()
    lines = _lines(capsys)
    assert lines[0] == "Grafo não dirigido:"
    assert "HasEdge A-D: false" in lines
    assert "Tem ciclo? false" in lines
    assert "É conectado? false" in lines
    assert "Caminho mais curto entre A e F: []" in lines


def test_demo_unweighted_edge_removed(capsys):
    demo_unweighted()
    lines = _lines(capsys)
    has_ab = [line for line in lines if line.startswith("HasEdge A-B:")]
    assert has_ab == ["HasEdge A-B: true", "HasEdge A-B: false"]
    assert "Após remover A-B:" in lines


def test_demo_unweighted_shortest_path(capsys):
    demo_unweighted()
    lines = _lines(capsys)
    assert "Caminho mais curto entre A e D: [A B D]" in lines


def test_demo_directed_cycle_disappears(capsys):
    demo_directed()
    lines = _lines(capsys)
    assert lines[0] == "Grafo dirigido:"
    assert "Tem ciclo? true" in lines
    assert "Tem ciclo agora? false" in lines
    assert "HasEdge B-A: false" in lines
    assert "Vizinhos de E: [F]" in lines


def test_demo_directed_neighbors_of_a(capsys):
    demo_directed()
    lines = _lines(capsys)
    assert "Vizinhos de A: [B C]" in lines


def test_main_runs_both_demos(capsys):
    assert main([]) == 0
    lines = _lines(capsys)
    assert lines.index("Grafo não dirigido:") < lines.index("Grafo dirigido:")


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2