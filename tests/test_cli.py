"""Tests for term_clock.cli module."""

import argparse

import pytest

from term_clock.cli import (
    anchor_arg,
    color_arg,
    interval_ms,
    non_negative_int,
    parse_args,
    positive_int,
)
from term_clock.position import Anchor
from term_clock.validators import MAX_INTERVAL_MS


class TestParseArgs:
    def test_no_arguments_selects_clock(self):
        args = parse_args([])
        assert args.mode is None
        assert args.color is None
        assert args.interval is None
        assert args.use_12h is False

    def test_display_options(self):
        args = parse_args(
            ["-c", "cyan", "-x", "start", "-y", "end", "-i", "100", "-t", "--utc", "-s", "-B", "-b"]
        )
        assert args.color.name == "cyan"
        assert args.x_pos is Anchor.START
        assert args.y_pos is Anchor.END
        assert args.interval == 100
        assert args.use_12h is True
        assert args.utc is True
        assert args.hide_seconds is True
        assert args.blink is True
        assert args.bold is True

    def test_fmt(self):
        assert parse_args(["--fmt", "%A %d %B"]).fmt == "%A %d %B"

    def test_timer_subcommand(self):
        args = parse_args(["timer", "-S", "30", "-M", "2", "-H", "1", "-k"])
        assert args.mode == "timer"
        assert (args.seconds, args.minutes, args.hours) == (30, 2, 1)
        assert args.kill is True

    def test_timer_defaults(self):
        args = parse_args(["timer"])
        assert (args.seconds, args.minutes, args.hours) == (None, None, None)
        assert args.kill is False

    def test_stopwatch_subcommand(self):
        assert parse_args(["stopwatch"]).mode == "stopwatch"

    def test_options_before_subcommand(self):
        args = parse_args(["-c", "red", "stopwatch"])
        assert args.mode == "stopwatch"
        assert args.color.name == "red"

    def test_invalid_color_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["-c", "#1a2b3"])
        assert exc_info.value.code == 2
        assert "expected format `#rrggbb`" in capsys.readouterr().err

    def test_unknown_mode_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["alarm"])

    def test_negative_timer_component_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["timer", "-S", "-5"])

    def test_huge_interval_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["-i", "10000000000000000"])
        assert exc_info.value.code == 2
        assert "at most" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "term-clock" in capsys.readouterr().out


class TestConverters:
    def test_color_arg(self):
        assert color_arg("bright-blue").name == "bright-blue"

    def test_color_arg_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError, match="possible values"):
            color_arg("mauve")

    def test_anchor_arg(self):
        assert anchor_arg("center") is Anchor.CENTER

    def test_anchor_arg_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError, match="start, center, end"):
            anchor_arg("left")

    def test_non_negative_int(self):
        assert non_negative_int("0") == 0
        assert non_negative_int("42") == 42

    @pytest.mark.parametrize("value", ["-1", "abc", "1.5"])
    def test_non_negative_int_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            non_negative_int(value)

    def test_positive_int_rejects_zero(self):
        with pytest.raises(argparse.ArgumentTypeError, match="greater than zero"):
            positive_int("0")

    def test_interval_ms_bounds(self):
        assert interval_ms("1") == 1
        assert interval_ms(str(MAX_INTERVAL_MS)) == MAX_INTERVAL_MS

    @pytest.mark.parametrize("value", ["0", str(MAX_INTERVAL_MS + 1), "10000000000000000"])
    def test_interval_ms_out_of_range(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            interval_ms(value)
