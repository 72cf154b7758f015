import io

import pytest

from labworks.console import Console, main
from labworks.storage import Storage

LANG = "1,C,Procedural,Ritchie\n2,Go,Compiled,Pike\n"
PROG = "1,Bob,Junior,01.01.2019\n"


@pytest.fixture
def storage(tmp_path):
    (tmp_path / "lang.csv").write_text(LANG)
    (tmp_path / "prog.csv").write_text(PROG)
    store = Storage(tmp_path)
    store.load()
    return store


def scripted(lines):
    pending = list(lines)
    prompts = []

    def fake(prompt):
        prompts.append(prompt)
        if not pending:
            raise EOFError
        return pending.pop(0)

    fake.prompts = prompts
    return fake


def run(storage, lines):
    out = io.StringIO()
    fake = scripted(lines)
    Console(storage, fake, out).show()
    return out.getvalue(), fake


def test_print_all_languages(storage):
    text, _ = run(storage, ["1", "1", "0", "0"])
    assert "1,C,Procedural,Ritchie\n" in text
    assert "2,Go,Compiled,Pike\n" in text


def test_create_language_saves(storage, tmp_path):
    run(storage, ["1", "3", "Rust", "Systems", "Hoare", "0", "0"])
    reloaded = Storage(tmp_path)
    reloaded.load()
    names = [lang.name for lang in reloaded.languages()]
    assert names == ["C", "Go", "Rust"]
    assert reloaded.languages()[-1].id == 3


def test_update_language(storage):
    text, _ = run(
        storage, ["1", "2", "1", "2", "Rust", "Systems", "Hoare", "1", "0", "0", "0"]
    )
    updated = storage.language(1)
    assert (updated.name, updated.kind, updated.author) == ("Rust", "Systems", "Hoare")
    assert "1,Rust,Systems,Hoare\n" in text


def test_delete_language(storage):
    run(storage, ["1", "2", "2", "3", "0", "0"])
    assert storage.language(2) is None
    assert [lang.id for lang in storage.languages()] == [1]


def test_missing_id_reported(storage):
    text, _ = run(storage, ["1", "2", "99", "1", "0", "0", "0"])
    assert "No element with id 99" in text


def test_create_programmer(storage):
    run(storage, ["2", "3", "Ann", "Senior", "01.02.2020", "0", "0"])
    created = storage.programmer(2)
    assert created.name == "Ann"
    assert created.date_of_start == "01.02.2020"


def test_end_of_input_stops_without_saving(storage, tmp_path):
    _, fake = run(storage, ["1"])
    assert fake.prompts[-1].endswith("Input command: ")
    assert (tmp_path / "lang.csv").read_text() == LANG


def test_main_missing_directory(tmp_path):
    assert main([str(tmp_path / "missing")]) == 1


def test_main_runs_menu(storage, tmp_path, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "0")
    assert main([str(tmp_path)]) == 0
    assert (tmp_path / "prog.csv").read_text() == PROG