"""Integration tests for the record and replay harness.

Tests cover:
- Locating the first differing line of two transcripts
- Reading and writing choice logs
- Replaying the demo world deterministically
- Checking saved choices against saved transcripts
- Recording with resume
"""

import pytest

from menu_adventures.engine.errors import ChoicesExhausted
from menu_adventures.testing import (
    LineDifference,
    check_choices,
    find_line_difference,
    read_choices,
    replay,
    save_choices,
    write_choices,
)
from menu_adventures.world import WorldLoader


@pytest.fixture
def make_universe(worlds_dir):
    """Factory building a fresh demo universe around an interface."""
    loader = WorldLoader(worlds_dir)
    return lambda interface: loader.load_universe("demo", interface)


class TestFindLineDifference:
    """Tests for find_line_difference."""

    def test_changed_line(self) -> None:
        """The first differing line is reported with its number."""
        assert find_line_difference("a\nb\nc", "a\nx\nc") == LineDifference(2, "b", "x")

    def test_received_longer(self) -> None:
        """Extra received lines have no line number."""
        assert find_line_difference("a", "a\nb") == LineDifference(None, "", "b")

    def test_expected_longer(self) -> None:
        """Missing received lines have no line number."""
        assert find_line_difference("a\nb", "a") == LineDifference(None, "b", "")

    def test_equal(self) -> None:
        """Equal transcripts are a usage error."""
        with pytest.raises(ValueError):
            find_line_difference("a\nb", "a\nb")


class TestChoiceFiles:
    """Tests for reading and writing choice logs."""

    def test_write_then_read(self, tmp_path) -> None:
        """Choices are written one per line."""
        path = tmp_path / "choices.txt"

        write_choices(path, [7, 3, 10])

        assert path.read_text() == "7\n3\n10\n"
        assert read_choices(path) == [7, 3, 10]

    def test_append(self, tmp_path) -> None:
        """Appending keeps the earlier choices."""
        path = tmp_path / "choices.txt"
        write_choices(path, [1])

        write_choices(path, [2], append=True)

        assert read_choices(path) == [1, 2]

    def test_any_whitespace(self, tmp_path) -> None:
        """Choices may be separated by any whitespace."""
        path = tmp_path / "choices.txt"
        path.write_text("7 3\n\n10")

        assert read_choices(path) == [7, 3, 10]


@pytest.mark.integration
class TestReplay:
    """Tests for replaying and checking choice logs."""

    def test_deterministic(self, make_universe) -> None:
        """The same choices always give the same transcript."""
        choices = [7, 1, 10]

        assert replay(make_universe, choices) == replay(make_universe, choices)

    def test_unfinished(self, make_universe) -> None:
        """A log that does not end the game raises."""
        with pytest.raises(ChoicesExhausted):
            replay(make_universe, [2])

    def test_check_matches(self, make_universe, tmp_path) -> None:
        """A transcript saved from a replay checks out."""
        choices_file = tmp_path / "choices.txt"
        transcript_file = tmp_path / "transcript.txt"
        write_choices(choices_file, [7, 1, 10])
        transcript_file.write_text(replay(make_universe, [7, 1, 10]))

        assert check_choices(make_universe, choices_file, transcript_file) is True

    def test_check_mismatch(self, make_universe, tmp_path, capsys) -> None:
        """A changed transcript fails and shows the first differing line."""
        choices_file = tmp_path / "choices.txt"
        transcript_file = tmp_path / "transcript.txt"
        write_choices(choices_file, [6])
        transcript_file.write_text(replay(make_universe, [6]).replace("A non-descript", "A fancy"))

        assert check_choices(make_universe, choices_file, transcript_file) is False

        out = capsys.readouterr().out
        assert "Line:\n3\nExpected:\nA fancy room\nGot:\nA non-descript room\n" in out

    def test_check_unfinished(self, make_universe, tmp_path) -> None:
        """A log that runs out before the game ends fails the check."""
        choices_file = tmp_path / "choices.txt"
        transcript_file = tmp_path / "transcript.txt"
        write_choices(choices_file, [2])
        transcript_file.write_text("")

        assert check_choices(make_universe, choices_file, transcript_file) is False

    def test_save_with_resume(self, make_universe, tmp_path) -> None:
        """Resuming replays the saved choices and saves the whole game."""
        choices_file = tmp_path / "choices.txt"
        transcript_file = tmp_path / "transcript.txt"
        choices_file.write_text("7\n1\n10\n")

        save_choices(make_universe, choices_file, transcript_file, resume=True)

        assert read_choices(choices_file) == [7, 1, 10]
        assert transcript_file.read_text() == replay(make_universe, [7, 1, 10])
        assert check_choices(make_universe, choices_file, transcript_file) is True
