"""Tests for xcodebuild_tooling.command.arguments."""

import re

from xcodebuild_tooling.command import (
    Argument,
    ArgumentValue,
    all_argument_strings,
    argument_strings,
    argument_value_string,
    escape_whitespace,
)


def _split_unescaped(s: str) -> list[str]:
    return [t for t in re.split(r"(?<!\\)\s+", s) if t]


class TestEscapeWhitespace:
    def test_escapes_single_space(self) -> None:
        assert escape_whitespace("My App") == "My\\ App"

    def test_escapes_leading_space(self) -> None:
        assert escape_whitespace(" a") == "\\ a"

    def test_escapes_every_space_in_a_run(self) -> None:
        assert escape_whitespace("a  b") == "a\\ \\ b"

    def test_keeps_already_escaped_space(self) -> None:
        assert escape_whitespace("a\\ b") == "a\\ b"

    def test_escapes_tab(self) -> None:
        assert escape_whitespace("a\tb") == "a\\\tb"

    def test_no_whitespace_unchanged(self) -> None:
        assert escape_whitespace("platform=iOS") == "platform=iOS"


class TestArgumentValueString:
    def test_uses_resolved_value_by_default(self) -> None:
        value = ArgumentValue(original_value="App.xcodeproj", resolved_value="/src/App.xcodeproj")
        assert argument_value_string(value) == "/src/App.xcodeproj"

    def test_uses_original_value(self) -> None:
        value = ArgumentValue(original_value="App.xcodeproj", resolved_value="/src/App.xcodeproj")
        assert argument_value_string(value, use_resolved_value=False) == "App.xcodeproj"

    def test_escapes_only_when_asked(self) -> None:
        value = ArgumentValue.plain("My Scheme")
        assert argument_value_string(value) == "My Scheme"
        assert argument_value_string(value, escape_value=True) == "My\\ Scheme"


class TestArgumentStrings:
    def test_name_only(self) -> None:
        assert argument_strings(Argument(name="-quiet")) == ["-quiet"]

    def test_name_then_value(self) -> None:
        arg = Argument(name="-scheme", value=ArgumentValue.plain("App"))
        assert argument_strings(arg) == ["-scheme", "App"]

    def test_flattens_in_order(self) -> None:
        args = [
            Argument(name="-project", value=ArgumentValue("App.xcodeproj", "/w/App.xcodeproj")),
            Argument(name="-quiet"),
            Argument(name="build"),
        ]
        assert all_argument_strings(args) == ["-project", "/w/App.xcodeproj", "-quiet", "build"]
        assert all_argument_strings(args, use_resolved_value=False) == [
            "-project",
            "App.xcodeproj",
            "-quiet",
            "build",
        ]

    def test_escaped_join_resplits_to_same_token_count(self) -> None:
        args = [
            Argument(name="-scheme", value=ArgumentValue.plain("My  Fancy App")),
            Argument(name="-destination", value=ArgumentValue.plain("platform=iOS Simulator,name=iPhone 15")),
            Argument(name="test"),
        ]
        tokens = all_argument_strings(args, escape_value=True)
        assert len(_split_unescaped(" ".join(tokens))) == len(tokens) == 5

    def test_value_objects_compare_structurally(self) -> None:
        assert Argument("-sdk", ArgumentValue.plain("iphoneos")) == Argument(
            "-sdk", ArgumentValue("iphoneos", "iphoneos")
        )
