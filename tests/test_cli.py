"""Tests for the stack command line and its settings."""
import logging

import pytest
from pydantic import ValidationError

from statet import Array, Just, Left, Nothing, Right, Tuple
from statet.__main__ import main
from statet.config import StackDemoConfig
from statet.display import failure, outcome_table, outcomes
from statet.log import configure_logging
from statet.stack import Pop, Push


@pytest.fixture(autouse=True)
def reset_logger():
    """configure_logging changes the shared statet logger; restore it."""
    yield
    logger = logging.getLogger("statet")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestConfig:
    def test_defaults(self):
        config = StackDemoConfig(commands=("pop",))
        assert config.context == "either"
        assert config.initial == ()
        assert config.log_level == "WARNING"

    def test_initial_from_string(self):
        config = StackDemoConfig(initial="a,b", commands=("pop",))
        assert config.initial == ("a", "b")

    def test_parsed_commands(self):
        config = StackDemoConfig(commands=("push:x", "pop"))
        assert config.parsed_commands() == (Push("x"), Pop())

    @pytest.mark.parametrize("kwargs", [
        {"commands": ("drop",)},
        {"commands": ()},
        {"commands": ("pop",), "context": "future"},
        {"commands": ("pop",), "log_level": "LOUD"},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValidationError):
            StackDemoConfig(**kwargs)


class TestDisplay:
    def test_outcomes(self):
        t = Tuple(("a",), Array(("b",)))
        assert outcomes(Just(t)) == (t,)
        assert outcomes(Right(t)) == (t,)
        assert outcomes(Array((t, t))) == (t, t)
        assert outcomes(Nothing) == ()
        assert outcomes(Left("e")) == ()

    def test_failure(self):
        assert failure(Left("empty stack")) == "Left: empty stack"
        assert failure(Nothing) == "Nothing"
        assert failure(Just(Tuple((), Array(())))) is None

    def test_table(self):
        text = outcome_table("maybe", Just(Tuple(("a", "b"), Array(("c",)))))
        assert "context: maybe" in text
        assert "a, b" in text


class TestMain:
    def test_success(self, capsys):
        code = main(["--context", "either", "--initial", "hello,world,!",
                     "push:a", "pop", "pop"])
        out = capsys.readouterr().out
        assert code == 0
        assert "world, !" in out
        assert "a, hello" in out

    def test_context_failure(self, capsys):
        code = main(["--context", "either", "pop"])
        assert code == 1
        assert "Left: empty stack" in capsys.readouterr().out

    def test_maybe_failure(self, capsys):
        assert main(["--context", "maybe", "pop"]) == 1
        assert "Nothing" in capsys.readouterr().out

    def test_invalid_command(self, capsys):
        assert main(["drop"]) == 2
        assert "drop" in capsys.readouterr().err

    def test_array_outcomes(self, capsys):
        assert main(["--context", "array", "--initial", "x", "peek"]) == 0
        assert "context: array" in capsys.readouterr().out


def test_configure_logging_single_handler():
    logger = configure_logging("DEBUG")
    configure_logging("INFO")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert not logger.propagate
