import argparse

import pytest

from robustirr.irr_cli import main, parse_amount


class TestParseAmount:
    def test_number(self):
        assert parse_amount("-100.5") == -100.5

    @pytest.mark.parametrize("token", ["NA", "nan", "None"])
    def test_missing(self, token):
        assert parse_amount(token) is None

    def test_garbage(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_amount("abc")


class TestMain:
    def test_defined(self, capsys):
        assert main(["-100", "60", "60"]) == 0
        out = capsys.readouterr().out
        assert "IRR (annual):" in out
        assert "13.07%" in out
        assert "brent" in out

    def test_gips(self, capsys):
        code = main(["-1", "1.1", "--dates", "2024-01-01", "2024-02-01", "--gips"])
        assert code == 0
        assert "Period Return (GIPS):" in capsys.readouterr().out

    def test_undefined(self, capsys):
        assert main(["1", "2", "3"]) == 1
        assert "undefined (no_outflow)" in capsys.readouterr().out

    def test_missing_token(self, capsys):
        assert main(["-5", "NA", "3"]) == 1
        assert "missing_amount" in capsys.readouterr().out

    def test_exponent_amounts_after_separator(self, capsys):
        assert main(["--", "-1e3", "1.1e3"]) == 0
        assert "10.00%" in capsys.readouterr().out

    def test_length_mismatch_exits(self):
        with pytest.raises(SystemExit):
            main(["-1", "2", "--dates", "2024-01-01"])
