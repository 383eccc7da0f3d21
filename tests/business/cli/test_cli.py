"""
CLI 命令测试

使用 click CliRunner 测试 payout / scenarios / score / rank 子命令。
"""

import json
from datetime import datetime, timezone

import pytest
from click.testing import CliRunner

from src.business.cli.main import cli
from src.business.config.tournament_config import DEFAULT_REFERRER_ADDRESS, REFERRER_ENV_VAR


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _ts(day: int) -> int:
    return int(datetime(2025, 1, day, 12, tzinfo=timezone.utc).timestamp())


def _history_record(day: int, premium: int, payout: int) -> dict:
    return {
        "address": f"0xpos{day}",
        "entryPremium": str(premium * 1_000_000),
        "numContracts": "100000000",
        "collateralDecimals": 6,
        "entryTimestamp": _ts(day),
        "expiryTimestamp": _ts(day) + 86400,
        "referrer": DEFAULT_REFERRER_ADDRESS,
        "status": "settled",
        "settlement": {"payoutBuyer": str(payout * 1_000_000)},
    }


class TestPayoutCommand:
    """Tests for `optixel payout`."""

    def test_call_spread(self, runner: CliRunner):
        result = runner.invoke(cli, ["payout", "-k", "100", "-k", "110", "-n", "5", "-p", "105"])
        assert result.exit_code == 0
        assert "结构: Spread CALL" in result.output
        assert "赔付: 25.0000" in result.output
        assert "最大赔付: 50.0000" in result.output

    def test_butterfly_at_middle(self, runner: CliRunner):
        result = runner.invoke(
            cli, ["payout", "-k", "90", "-k", "100", "-k", "110", "-n", "2", "-p", "100"]
        )
        assert result.exit_code == 0
        assert "Butterfly" in result.output
        assert "赔付: 20.0000" in result.output

    def test_raw_strikes(self, runner: CliRunner):
        result = runner.invoke(
            cli,
            ["payout", "-k", "10000000000", "-k", "11000000000", "--raw", "-n", "1", "-p", "120"],
        )
        assert result.exit_code == 0
        assert "赔付: 10.0000" in result.output

    def test_negative_contracts_rejected(self, runner: CliRunner):
        result = runner.invoke(cli, ["payout", "-k", "100", "-n", "-5", "-p", "120"])
        assert result.exit_code == 2
        assert "赔付" not in result.output

    def test_unsorted_strikes_rejected(self, runner: CliRunner):
        result = runner.invoke(cli, ["payout", "-k", "110", "-k", "100", "-n", "1", "-p", "105"])
        assert result.exit_code == 1
        assert "行权价无效" in result.output

    def test_too_many_strikes_rejected(self, runner: CliRunner):
        args = ["payout", "-n", "1", "-p", "100"]
        for k in ("1", "2", "3", "4", "5"):
            args += ["-k", k]
        result = runner.invoke(cli, args)
        assert result.exit_code == 1


class TestScenariosCommand:
    """Tests for `optixel scenarios`."""

    def test_json_output(self, runner: CliRunner):
        result = runner.invoke(
            cli, ["scenarios", "-k", "3000", "-i", "100", "-c", "25", "-o", "json"]
        )
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        assert data["structure"] == "Vanilla"
        assert data["contracts"] == pytest.approx(4)
        assert [s["label"] for s in data["scenarios"]][:2] == ["Max Loss", "Breakeven"]
        assert len(data["scenarios"]) == 7
        assert data["breakevens"] == [pytest.approx(3025)]
        assert data["target"]["label"] == "at 5% up"

    def test_text_output(self, runner: CliRunner):
        result = runner.invoke(
            cli, ["scenarios", "-k", "2900", "-k", "3000", "-t", "put", "-i", "50", "-c", "12.5"]
        )
        assert result.exit_code == 0
        assert "Spread PUT" in result.output
        assert "-1% Move" in result.output
        assert "最佳收益: at $2,900" in result.output


class TestScoreCommand:
    """Tests for `optixel score`."""

    def test_score(self, runner: CliRunner):
        result = runner.invoke(
            cli,
            ["score", "--premium", "1000", "--profit", "500", "--trades", "16", "--streak", "9"],
        )
        assert result.exit_code == 0
        assert "62.00" in result.output

    def test_negative_trades_rejected(self, runner: CliRunner):
        result = runner.invoke(
            cli, ["score", "--premium", "1", "--profit", "0", "--trades", "-1"]
        )
        assert result.exit_code != 0


class TestRankCommand:
    """Tests for `optixel rank`."""

    @pytest.fixture(autouse=True)
    def _no_env_referrer(self, monkeypatch):
        monkeypatch.delenv(REFERRER_ENV_VAR, raising=False)

    def _write(self, tmp_path, payload) -> str:
        path = tmp_path / "histories.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)

    def test_json_leaderboard(self, runner: CliRunner, tmp_path):
        path = self._write(
            tmp_path,
            {
                "0xSMALL": [_history_record(2, 10, 0)],
                "0xbig": [
                    _history_record(2, 500, 900),
                    _history_record(3, 500, 0),
                ],
            },
        )
        result = runner.invoke(
            cli, ["rank", path, "--start", "2025-01-01", "--end", "2025-01-31", "-o", "json"]
        )
        assert result.exit_code == 0

        board = json.loads(result.stdout)
        assert [p["wallet_address"] for p in board] == ["0xbig", "0xsmall"]
        assert [p["rank"] for p in board] == [1, 2]
        assert board[0]["streak_days"] == 2
        assert board[0]["total_profit"] == pytest.approx(-100)

    def test_text_leaderboard(self, runner: CliRunner, tmp_path):
        path = self._write(tmp_path, {"0xa": [_history_record(2, 100, 150)]})
        result = runner.invoke(cli, ["rank", path, "--start", "2025-01-01", "--end", "2025-01-31"])
        assert result.exit_code == 0
        assert "#1" in result.output
        assert "0xa" in result.output

    def test_date_only_end_includes_whole_day(self, runner: CliRunner, tmp_path):
        record = _history_record(30, 100, 150)  # expires 2025-01-31 12:00 UTC
        path = self._write(tmp_path, {"0xa": [record]})

        result = runner.invoke(
            cli, ["rank", path, "--start", "2025-01-01", "--end", "2025-01-31", "-o", "json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["trade_count"] == 1

    def test_explicit_end_time_is_exact(self, runner: CliRunner, tmp_path):
        record = _history_record(30, 100, 150)
        path = self._write(tmp_path, {"0xa": [record]})

        result = runner.invoke(
            cli,
            ["rank", path, "--start", "2025-01-01", "--end", "2025-01-31 00:00:00", "-o", "json"],
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["trade_count"] == 0

    def test_not_an_object(self, runner: CliRunner, tmp_path):
        path = self._write(tmp_path, [1, 2, 3])
        result = runner.invoke(cli, ["rank", path, "--start", "2025-01-01", "--end", "2025-01-31"])
        assert result.exit_code == 1
        assert "输入错误" in result.output

    def test_end_before_start(self, runner: CliRunner, tmp_path):
        path = self._write(tmp_path, {})
        result = runner.invoke(cli, ["rank", path, "--start", "2025-02-01", "--end", "2025-01-01"])
        assert result.exit_code == 1

    def test_invalid_day_length(self, runner: CliRunner, tmp_path):
        path = self._write(tmp_path, {})
        result = runner.invoke(
            cli,
            ["rank", path, "--start", "2025-01-01", "--end", "2025-01-31", "--day-length", "0"],
        )
        assert result.exit_code == 1
