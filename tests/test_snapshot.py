import json

import pytest
from pydantic import ValidationError

from mineopoly.cli import main
from mineopoly.schemas import BoardSummary
from mineopoly.snapshot import board_rows, serialize_board


class TestSerializeBoard:
    """Tests for the public board snapshot."""

    def test_summary_validates(self, generated_board):
        """Test that the serialized board passes schema validation."""
        summary = BoardSummary.model_validate(serialize_board(generated_board))

        assert summary.board_size == 20
        assert summary.seed == 42
        assert summary.red_start_location == (9, 9)
        assert summary.blue_start_location == (10, 9)
        assert sorted(summary.markets.red) == [(9, 9), (10, 10)]
        assert sorted(summary.markets.blue) == [(9, 10), (10, 9)]

    def test_rows_top_first(self, generated_board):
        """Test that the first row is the top of the board."""
        rows = board_rows(generated_board)

        assert len(rows) == 20
        assert rows[19 - 9][9] == "R"
        assert rows[19 - 10][10] == "R"
        assert rows[19 - 10][9] == "B"
        assert rows[19 - 9][10] == "B"
        assert sum(row.count("R") for row in rows) == 2
        assert sum(row.count("B") for row in rows) == 2

    def test_resource_counts_match_rows(self, generated_board):
        """Test that the counts agree with the tile symbols."""
        snapshot = serialize_board(generated_board)
        joined = "".join(snapshot["rows"])

        assert snapshot["resource_counts"] == {
            "diamond": joined.count("d"),
            "emerald": joined.count("e"),
            "ruby": joined.count("r"),
        }

    def test_json_serializable(self, generated_board):
        """Test that the snapshot survives a JSON dump."""
        assert json.loads(json.dumps(serialize_board(generated_board)))["board_size"] == 20

    def test_malformed_rows_rejected(self, generated_board):
        """Test that the schema rejects a grid of the wrong shape."""
        snapshot = serialize_board(generated_board)
        snapshot["rows"] = snapshot["rows"][:-1]

        with pytest.raises(ValidationError):
            BoardSummary.model_validate(snapshot)


class TestCli:
    """Tests for the command line entry point."""

    def test_path(self, capsys):
        """Test that the path command prints the canonical actions."""
        assert main(["path", "4,7", "2,6"]) == 0
        assert capsys.readouterr().out.strip() == "move_left move_left move_down"

    def test_path_json(self, capsys):
        """Test the JSON path response."""
        assert main(["path", "0,0", "2,1", "--json"]) == 0
        response = json.loads(capsys.readouterr().out)

        assert response["length"] == 3
        assert response["actions"] == ["move_right", "move_right", "move_up"]

    def test_board_json_is_reproducible(self, capsys):
        """Test that the same seed prints the same board."""
        main(["board", "--seed", "5", "--size", "12", "--json"])
        first = json.loads(capsys.readouterr().out)
        main(["board", "--seed", "5", "--size", "12", "--json"])
        second = json.loads(capsys.readouterr().out)

        assert first == second
        assert first["board_size"] == 12

    def test_board_text(self, capsys):
        """Test the plain board printout."""
        assert main(["board", "--seed", "1", "--size", "10"]) == 0
        out = capsys.readouterr().out

        assert "Board 10x10 (seed=1)" in out
        assert "Deposits:" in out

    def test_invalid_size(self, capsys):
        """Test that an invalid board size is reported, not raised."""
        assert main(["board", "--seed", "1", "--size", "9"]) == 2
        assert "error:" in capsys.readouterr().err

