import os

import tsp_solver as solver_module
from tsp_solver import main, tsp_solver


def test_tsp_solver(write_input):
    G, cities, route = tsp_solver(write_input("A-B: 787\nB-C: 2015\nC-A: 2451\n"))
    assert cities == ["A", "B", "C"]
    assert route.total_cost == 5253
    assert G.number_of_nodes() == 3


def test_main_prints_route(write_input, capsys):
    assert main([write_input("A-B: 787\nB-C: 2015\nC-A: 2451\n")]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "We will visit the cities in the following order:",
        "A -( 787 )-> B",
        "B -( 2015 )-> C",
        "C -( 2451 )-> A",
        "Total cost: 5253",
    ]


def test_main_is_deterministic(write_input, capsys):
    text = "".join(f"C{i}-C{j}: {(i * 7 + j * 3) % 11 + 1}\n" for i in range(7) for j in range(i + 1, 7))
    path = write_input(text)
    main([path])
    first = capsys.readouterr().out
    main([path])
    assert capsys.readouterr().out == first


def test_main_no_route(write_input, capsys):
    assert main([write_input("A-B: 1\nC-D: 1\n")]) == 0
    assert capsys.readouterr().out == "No valid TSP route found.\n"


def test_main_single_city(write_input, capsys):
    assert main([write_input("A-A: 9\n")]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Total cost: 0"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.in")]) == 1
    assert capsys.readouterr().err == "Error opening the file\n"


def test_main_bad_input(write_input, capsys):
    assert main([write_input("A to B: 3\n")]) == 1
    assert capsys.readouterr().err.startswith("Error: line 1")

    assert main([write_input("")]) == 1
    assert "empty" in capsys.readouterr().err

    text = "".join(f"C{i}-C{i + 1}: 1\n" for i in range(64))
    assert main([write_input(text)]) == 1
    assert "Too many cities (maximum is 64)" in capsys.readouterr().err


def test_main_out_and_draw(write_input, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    drawn = []
    monkeypatch.setattr(solver_module, "draw_route", lambda G, cities, route: drawn.append(route))
    path = write_input("A-B: 2\n", name="pair.in")
    assert main([path, "--out", "--draw"]) == 0
    with open(os.path.join(str(tmp_path), "outputs", "pair.out")) as f:
        assert f.read() == "A -( 2 )-> B\nB -( 2 )-> A\nTotal cost: 4\n"
    assert drawn[0].total_cost == 4
