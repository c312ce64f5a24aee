"""End-to-end tests for the `run` and `quote` subcommands."""

import pytest

from savings_ledger.entrypoints.cli.main import savings_ledger

from tests.helpers.cli_output import json_lines

# pylint: disable=unused-argument, magic-value-comparison

BASE = ["--no-flight-recorder"]

REFERENCE_SCENARIO = {
    "balances": {"user1": 1000},
    "checkpoints": {"user1": 0},
    "operations": [
        {"op": "accrue", "account": "user1", "block": 52560},
        {"op": "accrue", "account": "user2", "block": 52560},
        {"op": "set_goal", "account": "user1", "target": 5000, "duration": 1000, "block": 10},
        {"op": "set_goal", "account": "user1", "target": 0, "duration": 1000, "block": 10},
        {"op": "progress", "account": "user1", "block": 900},
        {"op": "progress", "account": "user2", "block": 500},
    ],
}


class TestRun:
    """Tests for `savings-ledger run`."""

    @staticmethod
    def test_prints_one_result_per_operation(runner, write_scenario):
        """Each operation yields one JSON line with `ok` or `error`."""
        path = write_scenario(REFERENCE_SCENARIO)

        result = runner.invoke(savings_ledger, BASE + ["run", path])

        assert result.exit_code == 0, result.output
        assert json_lines(result.output) == [
            {"op": "accrue", "account": "user1", "ok": 50},
            {"op": "accrue", "account": "user2", "ok": 0},
            {"op": "set_goal", "account": "user1", "ok": True},
            {"op": "set_goal", "account": "user1", "error": "ERR_AMOUNT_ZERO"},
            {
                "op": "progress",
                "account": "user1",
                "ok": {"target": 5000, "deadline": 1010, "progress": 21, "status": "ongoing"},
            },
            {
                "op": "progress",
                "account": "user2",
                "ok": {"target": 0, "deadline": 0, "progress": 0},
            },
        ]
        assert "1 rejected" in result.output

    @staticmethod
    def test_dump_state(runner, write_scenario):
        """--dump-state prints the final ledger as the last JSON line."""
        path = write_scenario(
            {"operations": [{"op": "deposit", "account": "a", "amount": 10}]}
        )

        result = runner.invoke(savings_ledger, BASE + ["run", "--dump-state", path])

        assert result.exit_code == 0, result.output
        assert json_lines(result.output)[-1] == {
            "balances": {"a": 10},
            "checkpoints": {},
            "goals": {},
        }

    @staticmethod
    def test_policy_option_applies_to_run(runner, write_scenario):
        """The global --rate-percent option changes accrued interest."""
        path = write_scenario(
            {
                "balances": {"a": 1000},
                "checkpoints": {"a": 0},
                "operations": [{"op": "accrue", "account": "a", "block": 52560}],
            }
        )

        result = runner.invoke(
            savings_ledger, BASE + ["--rate-percent", "10", "run", path]
        )

        assert json_lines(result.output) == [{"op": "accrue", "account": "a", "ok": 100}]

    @staticmethod
    def test_invalid_json_exits_with_error(runner, fs):
        """A file that is not JSON is reported and exits with code 1."""
        with open("broken.json", "w", encoding="utf-8") as fh:
            fh.write("{not json")

        result = runner.invoke(savings_ledger, BASE + ["run", "broken.json"])

        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    @staticmethod
    def test_malformed_scenario_exits_with_error(runner, write_scenario):
        """A scenario with an unknown op is reported and exits with code 1."""
        path = write_scenario({"operations": [{"op": "burn", "account": "a"}]})

        result = runner.invoke(savings_ledger, BASE + ["run", path])

        assert result.exit_code == 1
        assert "Invalid scenario" in result.output
        assert "unknown op 'burn'" in result.output

    @staticmethod
    def test_seeded_zero_target_goal_exits_with_error(runner, write_scenario):
        """A seed goal with a zero target is refused before any operation runs."""
        path = write_scenario(
            {
                "goals": {"a": {"target": 0, "deadline": 1}},
                "operations": [{"op": "progress", "account": "a", "block": 0}],
            }
        )

        result = runner.invoke(savings_ledger, BASE + ["run", path])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "goals.a.target: must be at least 1, got 0" in result.output
        assert json_lines(result.output) == []

    @staticmethod
    def test_missing_file_is_a_usage_error(runner, fs):
        """A scenario path that does not exist is rejected by Click."""
        result = runner.invoke(savings_ledger, BASE + ["run", "nope.json"])
        assert result.exit_code == 2


class TestQuote:
    """Tests for `savings-ledger quote`."""

    @staticmethod
    def test_default_policy(runner, fs):
        """1000 over one period at the default 5% is 50."""
        result = runner.invoke(
            savings_ledger, BASE + ["quote", "--balance", "1000", "--blocks", "52560"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "50"

    @staticmethod
    def test_rate_from_environment(runner, fs):
        """SAVINGS_LEDGER_RATE_PERCENT sets the rate."""
        result = runner.invoke(
            savings_ledger,
            BASE + ["quote", "--balance", "1000", "--blocks", "52560"],
            env={"SAVINGS_LEDGER_RATE_PERCENT": "7"},
        )
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "70"

    @staticmethod
    @pytest.mark.parametrize("args", [["--balance", "-1", "--blocks", "1"]])
    def test_negative_input_is_a_usage_error(runner, fs, args):
        """Negative balances are rejected."""
        result = runner.invoke(savings_ledger, BASE + ["quote"] + args)
        assert result.exit_code == 2
