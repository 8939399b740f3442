"""
test_cli.py - End-to-end runs of the command-line entry point.

The RPC source is patched so no network access happens.
"""

from datetime import datetime, timedelta

import pytest

from earnings import cli
from earnings.errors import FetchError
from earnings.rpc import RpcTransactionSource

from .conftest import make_tx

ARGS = ["http://node:8332", "user", "secret"]


@pytest.fixture
def fetched(monkeypatch):
    """Patch the RPC source; returns the list of fetched wallet ids."""
    calls = []
    recent = datetime.now() - timedelta(hours=2)

    def fake_fetch(self, wallet_id):
        calls.append(wallet_id)
        return [make_tx(recent, amount=1.5, height=1000 + len(calls))]

    monkeypatch.setattr(RpcTransactionSource, "fetch", fake_fetch)
    return calls


class TestMain:

    def test_report_printed(self, fetched, capsys):
        code = cli.main(ARGS + ["w1", "w2", "w1", "--days", "3"])
        out = capsys.readouterr().out
        assert code == cli.EXIT_OK
        assert sorted(fetched) == ["w1", "w2"]
        assert out.startswith("2 transactions (wallet(s): w1, w2)")
        assert "Report period total: 3.00" in out

    def test_usage_error(self, fetched, capsys):
        code = cli.main(ARGS + ["w1", "--days", "1"])
        err = capsys.readouterr().err
        assert code == cli.EXIT_USAGE
        assert "at least 2 days" in err
        assert "usage:" in err
        assert fetched == []

    def test_missing_arguments(self, capsys):
        assert cli.main(["http://node:8332"]) == cli.EXIT_USAGE
        assert "usage:" in capsys.readouterr().err

    def test_fetch_error(self, monkeypatch):
        def failing_fetch(self, wallet_id):
            raise FetchError("connection refused", wallet_id)

        monkeypatch.setattr(RpcTransactionSource, "fetch", failing_fetch)
        assert cli.main(ARGS + ["w1"]) == cli.EXIT_FETCH

    def test_empty_result(self, monkeypatch):
        monkeypatch.setattr(RpcTransactionSource, "fetch", lambda self, wallet_id: [])
        assert cli.main(ARGS + ["w1"]) == cli.EXIT_EMPTY
