import pytest

from labworks.tree_report import (
    default_maps,
    main,
    make_language_map,
    maps_from_table,
)


def test_make_language_map_fields():
    record = make_language_map(12, "Java", "Object-oriented", "sada")
    assert len(record) == 4
    assert record["id"] == "12"
    assert record["name"] == "Java"
    assert record["type"] == "Object-oriented"
    assert record["author"] == "sada"


def test_default_maps_ids_and_names():
    maps = default_maps()
    assert [m["id"] for m in maps] == ["34", "831", "12", "1023", "2"]
    assert [m["name"] for m in maps] == ["PHP", "Python", "Java", "Ruby on Rails", "Perl"]


def test_maps_from_table_skips_header_and_blank():
    table = [["id", "name", "type", "author"], ["007", "Go", "Compiled", "Pike"], [""]]
    maps = maps_from_table(table)
    assert len(maps) == 1
    assert maps[0]["id"] == "7"
    assert maps[0]["author"] == "Pike"


def test_maps_from_table_short_row():
    with pytest.raises(ValueError):
        maps_from_table([["id", "name", "type", "author"], ["1", "Go"]])


def test_main_filter_prints_rows(capsys):
    assert main(["-n", "20"]) == 0
    out = capsys.readouterr().out
    assert out == "12,Java,Object-oriented,sada\n2,Perl,Multi-paradigm,Larry Wall\n"


def test_main_without_options_prints_all(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert lines[0] == "34,PHP,J ,f"


@pytest.mark.parametrize(
    "args, message",
    [
        (["-n", "x"], "Not int with -n!"),
        (["-n"], "No num!"),
        (["-o"], "No name!"),
        (["-o", "a/b"], "Not name -o!"),
    ],
)
def test_main_usage_errors(capsys, args, message):
    assert main(args) == 1
    assert capsys.readouterr().out.strip() == message


def test_main_tree_deletes_large_ids(capsys):
    assert main(["-b", "-n", "100"]) == 0
    out = capsys.readouterr().out
    first, rest = out.split("New BinTree:")
    assert "831" in first and "1023" in first
    tree_part = rest.split("34,PHP")[0]
    assert "831" not in tree_part
    assert "1023" not in tree_part
    assert " 34" in tree_part


def test_main_file_round_trip(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    body = '5,"C, the language",Procedural,Ritchie\n3,Go,Compiled,Pike'
    (tmp_path / "data.csv").write_text("id,name,type,author\n" + body + "\n")
    assert main(["data.csv", "-o", "out.csv"]) == 0
    assert (tmp_path / "out.csv").read_text() == body


def test_main_tree_duplicate_ids(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "data.csv").write_text("id,name,type,author\n1,A,B,C\n1,D,E,F\n")
    assert main(["data.csv", "-b"]) == 1