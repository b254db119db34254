from calc import main


def test_values(capsys):
    assert main(["3a2c4", "3ae4c66fb32", ""]) == 0
    assert capsys.readouterr().out.splitlines() == ["20", "235", "0"]


def test_rpn(capsys):
    assert main(["--rpn", "3c4d2aee2a4c41fc4f"]) == 0
    assert capsys.readouterr().out == "3 4 c 2 d 2 4 a 41 c 4 c a\n"


def test_error(capsys):
    assert main(["1a1", "123ae2d2", "2"]) == 1
    out, err = capsys.readouterr()
    assert out == "2\n"
    assert err == "error: missing right parenthesis at position 4 in '123ae2d2'\n"
