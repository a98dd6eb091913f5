# ABOUTME: Tests for the command-line entry point
# ABOUTME: Runs main() end to end against captured stdout and scripted input

import logging

import pytest

import main as cli
from logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path, monkeypatch):
    """Run from an empty directory so the repo's pyproject.toml is not picked up."""
    monkeypatch.chdir(tmp_path)
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


def scripted(lines):
    remaining = list(lines)

    def read_line(*args):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_line


def quiet_config(tmp_path, extra=""):
    config_file = tmp_path / "quiet.toml"
    config_file.write_text(
        "[tool.dragons_escape.presentation]\n"
        "enable_animations = false\n"
        "show_title_screen = false\n"
        "clear_screen = false\n" + extra,
        encoding="utf-8",
    )
    return config_file


class TestMain:
    def test_full_session_exits_zero(self, tmp_path, capsys):
        status = cli.main(
            ["--config", str(quiet_config(tmp_path))],
            input_func=scripted(["go north", "go east", "look", "quit"]),
        )

        out = capsys.readouterr().out
        assert status == 0
        assert "Hallway" in out
        assert "YOU FOUND THE DRAGON'S HOARD!" in out
        assert "You examine your surroundings carefully..." in out
        assert "Thanks for playing!" in out

    def test_end_of_input_exits_zero(self, tmp_path, capsys):
        status = cli.main(["--config", str(quiet_config(tmp_path))], input_func=scripted([]))

        assert status == 0
        assert "FAREWELL!" in capsys.readouterr().out

    def test_no_animations_flag(self, capsys, monkeypatch):
        monkeypatch.setenv("DRAGONS_ESCAPE_SHOW_TITLE_SCREEN", "false")
        args = cli.build_parser().parse_args(["--no-animations"])

        assert cli.load_configuration(args).enable_animations is False

        status = cli.main(["--no-animations"], input_func=scripted(["go north", "quit"]))

        assert status == 0
        assert "Moving NORTH" in capsys.readouterr().out

    def test_missing_config_file(self, tmp_path, capsys):
        status = cli.main(["--config", str(tmp_path / "absent.toml")], input_func=scripted([]))

        assert status == 2
        assert "Configuration error" in capsys.readouterr().err

    def test_malformed_pyproject_in_working_directory(self, tmp_path, capsys):
        (tmp_path / "pyproject.toml").write_text("[project\nname = 'x'\n", encoding="utf-8")

        status = cli.main(["--no-animations"], input_func=scripted([]))

        assert status == 2
        assert "Configuration error" in capsys.readouterr().err

    def test_config_path_is_a_directory(self, tmp_path, capsys):
        status = cli.main(["--config", str(tmp_path)], input_func=scripted([]))

        assert status == 2
        assert "Configuration error" in capsys.readouterr().err

    def test_bad_log_level(self, tmp_path, capsys):
        status = cli.main(
            ["--config", str(quiet_config(tmp_path)), "--log-level", "LOUD"],
            input_func=scripted([]),
        )

        assert status == 2
        assert "Configuration error" in capsys.readouterr().err

    def test_unknown_start_room(self, tmp_path, capsys):
        config_file = quiet_config(tmp_path, '\n[tool.dragons_escape.world]\nstart_room = "Attic"\n')

        status = cli.main(["--config", str(config_file)], input_func=scripted([]))

        assert status == 2
        assert "Attic" in capsys.readouterr().err

    def test_json_log_written(self, tmp_path):
        json_log = tmp_path / "game.jsonl"
        config_file = quiet_config(
            tmp_path,
            f'\n[tool.dragons_escape.logging]\nlog_level = "INFO"\njson_log_file = "{json_log.as_posix()}"\n',
        )

        cli.main(["--config", str(config_file)], input_func=scripted(["go north", "quit"]))

        from logger import parse_json_logs

        events = [entry["event_type"] for entry in parse_json_logs(str(json_log))]
        assert events == ["session_started", "room_entered", "session_ended"]
