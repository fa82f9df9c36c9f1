from envtoken import dotenv_lookup, lookup_from_settings, process_lookup
from envtoken.config import EnvTokenSettings


def test_process_lookup_distinguishes_absent_and_empty(monkeypatch):
    monkeypatch.setenv("_ENVTOKEN_EMPTY", "")
    monkeypatch.delenv("_ENVTOKEN_ABSENT", raising=False)

    assert process_lookup("_ENVTOKEN_EMPTY") == ""
    assert process_lookup("_ENVTOKEN_ABSENT") is None


def test_dotenv_lookup_fills_gaps(tmp_path, monkeypatch):
    dotenv = tmp_path / ".env"
    dotenv.write_text("_ENVTOKEN_A=from-file\n_ENVTOKEN_B=from-file\n_ENVTOKEN_BARE\n")
    monkeypatch.setenv("_ENVTOKEN_A", "from-process")
    monkeypatch.delenv("_ENVTOKEN_B", raising=False)
    monkeypatch.delenv("_ENVTOKEN_BARE", raising=False)

    lookup = dotenv_lookup(dotenv)

    assert lookup("_ENVTOKEN_A") == "from-process"
    assert lookup("_ENVTOKEN_B") == "from-file"
    assert lookup("_ENVTOKEN_BARE") is None


def test_dotenv_lookup_override(tmp_path, monkeypatch):
    dotenv = tmp_path / ".env"
    dotenv.write_text("_ENVTOKEN_A=from-file\n")
    monkeypatch.setenv("_ENVTOKEN_A", "from-process")

    assert dotenv_lookup(dotenv, override=True)("_ENVTOKEN_A") == "from-file"


def test_dotenv_lookup_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("_ENVTOKEN_A", "from-process")

    lookup = dotenv_lookup(tmp_path / "missing.env")

    assert lookup("_ENVTOKEN_A") == "from-process"


def test_lookup_from_settings(tmp_path, monkeypatch):
    dotenv = tmp_path / "app.env"
    dotenv.write_text("_ENVTOKEN_FILE_ONLY=yes\n")
    monkeypatch.delenv("_ENVTOKEN_FILE_ONLY", raising=False)

    plain = lookup_from_settings(EnvTokenSettings(_env_file=None))
    with_file = lookup_from_settings(EnvTokenSettings(_env_file=None, dotenv_path=dotenv))

    assert plain is process_lookup
    assert with_file("_ENVTOKEN_FILE_ONLY") == "yes"
