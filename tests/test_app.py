"""
Tests for the demo application
"""

from decimal import Decimal

from transfer_money import __main__ as entry_point
from transfer_money.app import run
from transfer_money.config import TransferMoneyConfig


class TestDemoApplication:
    """Test the demo scenario"""

    def test_default_scenario(self, capsys):
        """Test 1000/100 with a 200 transfer prints before and after"""
        account1, account2 = run(TransferMoneyConfig(_env_file=None))

        assert account1.current_balance() == Decimal('800')
        assert account2.current_balance() == Decimal('300')

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "Before: ",
            "account1: 1000",
            "account2: 100",
            "After: ",
            "account1: 800",
            "account2: 300",
        ]

    def test_custom_output(self):
        """Test routing output through a callable"""
        lines = []
        config = TransferMoneyConfig(
            _env_file=None,
            demo_source_opening_balance="50",
            demo_destination_opening_balance="0",
            demo_transfer_amount="200",
        )

        account1, account2 = run(config, out=lines.append)

        assert account1.entries() == (Decimal('50'),)
        assert account2.entries() == (Decimal('0'),)
        assert lines[-2:] == ["account1: 50", "account2: 0"]

    def test_main_success(self, monkeypatch, capsys):
        """Test the module entry point"""
        monkeypatch.setattr(entry_point, "setup_logging", lambda *args: None)
        monkeypatch.setattr(entry_point, "get_config",
                            lambda: TransferMoneyConfig(_env_file=None))

        assert entry_point.main() == 0
        assert "account1: 800" in capsys.readouterr().out

    def test_main_strict_failure(self, monkeypatch, capsys):
        """Test strict mode declines are reported and exit non-zero"""
        config = TransferMoneyConfig(
            _env_file=None, strict_transfers=True, demo_transfer_amount="5000"
        )
        monkeypatch.setattr(entry_point, "setup_logging", lambda *args: None)
        monkeypatch.setattr(entry_point, "get_config", lambda: config)

        assert entry_point.main() == 1
        assert "Insufficient funds" in capsys.readouterr().err
