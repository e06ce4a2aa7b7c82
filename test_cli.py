# test_cli.py

import json

from cli import main


def test_prints_formatted_shares(capsys):
    assert main(["900000", "--sons", "2", "--daughters", "1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Each Son's Share: ₹3,60,000.00",
        "Each Daughter's Share: ₹1,80,000.00",
    ]


def test_plain_format(capsys):
    assert main(["900000", "--sons", "2", "--daughters", "1", "--format", "plain"]) == 0
    assert "Each Son's Share: 360,000.00" in capsys.readouterr().out


def test_error_goes_to_stderr(capsys):
    assert main(["1000"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Please enter at least one son or daughter" in captured.err


def test_negative_amount(capsys):
    assert main(["-100", "--sons", "1"]) == 1
    assert "Please enter a valid positive amount" in capsys.readouterr().err


def test_json_output(capsys):
    assert main(["100", "--daughters", "1", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "success": True,
        "result": {"sonShare": 200.0, "daughterShare": 100.0},
    }


def test_unknown_format(capsys):
    assert main(["100", "--daughters", "1", "--format", "yen"]) == 2
    assert "Unknown currency format" in capsys.readouterr().err
