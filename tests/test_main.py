import pytest

from gboard_dictionary import FILE_HEADER, DictionaryRecord, read_all, read_all_with_category
from gboard_dictionary import main as cli


@pytest.fixture(autouse=True)
def quiet_startup(monkeypatch):
    """Keep the CLI away from .env files and the real log directory."""
    monkeypatch.setattr(cli, "load_dotenv", lambda: None)
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)


def run(*argv):
    return cli.main(list(argv))


def test_init_add_list(dict_path, capsys):
    assert run("-f", str(dict_path), "init") == 0
    assert dict_path.read_text(encoding="utf-8") == FILE_HEADER + "\n"

    assert run("-f", str(dict_path), "add", "cian", "#00FFFF", "--lang", "es-ES") == 0
    assert run("-f", str(dict_path), "add", "azul", "#0000FF", "--lang", "es-ES") == 0
    capsys.readouterr()

    assert run("-f", str(dict_path), "list") == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["azul\t#0000FF\tes-ES", "cian\t#00FFFF\tes-ES"]


def test_get_and_remove(dict_path, capsys):
    run("-f", str(dict_path), "init")
    run("-f", str(dict_path), "add", "brb", "be right back")
    capsys.readouterr()

    assert run("-f", str(dict_path), "get", "brb") == 0
    assert capsys.readouterr().out.strip() == "brb\tbe right back"

    assert run("-f", str(dict_path), "remove", "brb") == 0
    assert read_all(dict_path) == []
    assert run("-f", str(dict_path), "get", "brb") == 1


def test_categories_variant(dict_path, capsys):
    run("-f", str(dict_path), "-c", "init")
    run("-f", str(dict_path), "-c", "add", "cian", "#00FFFF", "--lang", "es-ES", "--category", "frio")
    run("-f", str(dict_path), "-c", "add", "blue", "#0000FF", "--lang", "en", "--category", "frio")
    assert read_all_with_category(dict_path)[0] == DictionaryRecord("blue", "#0000FF", "en", "frio")
    capsys.readouterr()

    assert run("-f", str(dict_path), "-c", "languages") == 0
    assert capsys.readouterr().out.splitlines() == ["en", "es-ES"]


def test_invalid_record_reports_error(dict_path, capsys):
    run("-f", str(dict_path), "init")
    assert run("-f", str(dict_path), "add", "x", "y", "--lang", "en_US") == 1
    assert "language code" in capsys.readouterr().err


def test_wrong_variant_reports_error(dict_path, capsys):
    run("-f", str(dict_path), "init")
    assert run("-f", str(dict_path), "-c", "list") == 1
    assert "error:" in capsys.readouterr().err


def test_default_path_from_settings(dict_path, settings_manager, monkeypatch):
    monkeypatch.setenv("GBOARD_DICTIONARY_PATH", str(dict_path))
    assert run("init") == 0
    assert dict_path.is_file()


def test_missing_path(capsys):
    assert run("list") == 2
    assert "No dictionary file" in capsys.readouterr().err


def test_numeric_log_level_in_config(dict_path, settings_manager):
    path = settings_manager.user_config_path
    path.parent.mkdir(parents=True)
    path.write_text("logging:\n  level: 10\n", encoding="utf-8")
    assert run("-f", str(dict_path), "init") == 0


def test_undecodable_file_reports_error(dict_path, capsys):
    dict_path.write_bytes(b"\xff\xfe garbage\n")
    assert run("-f", str(dict_path), "list") == 1
    assert "error:" in capsys.readouterr().err
