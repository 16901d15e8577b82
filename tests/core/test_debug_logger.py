"""
test_debug_logger.py
--------------------
Category and level filtering of the console logger.
"""

import pytest

from car_shoot.core.debug.debug_logger import Colors, DebugLogger, LoggerConfig
from car_shoot.core.debug.invariants import InvariantViolation, violation


@pytest.fixture
def loud_logger(monkeypatch):
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", True)
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(LoggerConfig, "CATEGORIES", {"game_state": True, "projectile": False})


def test_enabled_category_prints(loud_logger, capsys):
    DebugLogger.state("Round over", category="game_state")
    out = capsys.readouterr().out
    assert "[STATE]" in out
    assert "Round over" in out


def test_disabled_category_is_silent(loud_logger, capsys):
    DebugLogger.action("Fired", category="projectile")
    assert capsys.readouterr().out == ""


def test_verbose_trace_hidden_at_info(loud_logger, capsys):
    DebugLogger.trace("detail", category="game_state")
    assert capsys.readouterr().out == ""


def test_failures_bypass_category_filter(loud_logger, capsys):
    error = violation("Enemy directory out of sync", category="projectile")

    assert isinstance(error, InvariantViolation)
    assert "[FAIL]" in capsys.readouterr().out


def test_disabled_logging_prints_nothing(capsys):
    DebugLogger.fail("nothing")
    DebugLogger.section("Startup")
    assert capsys.readouterr().out == ""


def test_render_entry_pads_status():
    line = DebugLogger._render_entry("SoundManager", "OK")
    assert "> SoundManager" in line
    assert line.endswith(f"[OK]{Colors.RESET}")
