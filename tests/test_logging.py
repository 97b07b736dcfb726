import logging

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from monkey_explorer.cli import cli
from monkey_explorer.logging_config import parse_level, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize("name, expected", [
    ("DEBUG", logging.DEBUG),
    ("info", logging.INFO),
    ("Error", logging.ERROR),
    ("chatty", logging.WARNING),
    ("", logging.WARNING),
    (None, logging.WARNING),
])
def test_parse_level(name, expected):
    assert parse_level(name) == expected


def test_setup_logging_installs_one_rich_handler():
    setup_logging("INFO")
    setup_logging("INFO")
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)


@pytest.mark.parametrize("args, env, expected", [
    (["--debug"], {}, logging.DEBUG),
    (["--verbose"], {}, logging.INFO),
    (["-v"], {"MONKEY_LOG_LEVEL": "ERROR"}, logging.INFO),
    ([], {"MONKEY_LOG_LEVEL": "ERROR"}, logging.ERROR),
    ([], {"MONKEY_LOG_LEVEL": "nonsense"}, logging.WARNING),
])
def test_cli_log_level_resolution(args, env, expected):
    runner = CliRunner()
    res = runner.invoke(cli, args + ["list"], env=env)
    assert res.exit_code == 0, res.output
    assert logging.getLogger().level == expected
