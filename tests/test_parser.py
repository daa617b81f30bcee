"""Tests for bot/parser.py - command parsing."""

from trip_helper.bot.parser import parse_command


def test_parse_trip_command_with_args():
    assert parse_command("/trip create Paris") == ("trip", ["create", "Paris"])


def test_parse_lowercases_command_only():
    assert parse_command("/TRIP Location") == ("trip", ["Location"])


def test_parse_strips_bot_mention():
    assert parse_command("/trip@TripHelperBot help") == ("trip", ["help"])


def test_parse_command_without_args():
    assert parse_command("/start") == ("start", [])


def test_parse_plain_text_is_not_a_command():
    assert parse_command("hello /trip") == (None, [])


def test_parse_empty_text():
    assert parse_command("") == (None, [])


def test_parse_lone_slash():
    assert parse_command("/") == (None, [])
