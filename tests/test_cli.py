import io

from truthtable.cli import build_argparser, main, run


def run_with(capsys, argv, stdin=""):
    code = run(build_argparser().parse_args(argv), io.StringIO(stdin))
    return code, capsys.readouterr().out.splitlines()


def test_reads_from_stdin(capsys):
    code, out = run_with(capsys, [], "p imply q\n")
    assert code == 0
    assert out[0] == "Enter a boolean expression:"
    assert out[1] == "Tokens: ['p', 'imply', 'q']"
    assert out[2].startswith("Parse Tree: Imply(")
    assert "Variables: ['p', 'q']" in out
    assert out[-7:] == [
        "Truth Table:",
        "P | Q | Result",
        "--------------",
        "0 | 0 | true",
        "1 | 0 | false",
        "0 | 1 | true",
        "1 | 1 | true",
    ]


def test_expression_from_arguments(capsys):
    code, out = run_with(capsys, ["true", "and", "false"])
    assert code == 0
    assert "Enter a boolean expression:" not in out
    assert "Variables: []" in out
    assert out[-3:] == [" | Result", "---------", " | false"]


def test_parse_error(capsys):
    code, out = run_with(capsys, ["(", "a", "and", "b"])
    assert code == 1
    assert out[-1] == "Parsing Error: expected closing parenthesis"


def test_trailing_tokens(capsys):
    code, out = run_with(capsys, ["a", "b"])
    assert code == 0
    assert "Variables: ['a']" in out

    code, out = run_with(capsys, ["--no-trailing", "a", "b"])
    assert code == 1
    assert out[-1] == "Parsing Error: unexpected trailing token: b"


def test_end_of_input(capsys):
    code, out = run_with(capsys, [], "")
    assert code == 1
    assert out[-1] == "Invalid expression."


def test_binary_result_and_frame(capsys):
    code, out = run_with(capsys, ["--binary-result", "a"])
    assert out[-2:] == ["0 | 0", "1 | 1"]

    code, out = run_with(capsys, ["--frame", "a"])
    assert code == 0
    assert out[out.index("Truth Table:") + 1].split() == ["a", "Result"]


def test_main(capsys):
    assert main(["a", "or", "not", "a"]) == 0
    assert capsys.readouterr().out.splitlines()[-2:] == ["0 | true", "1 | true"]


def test_deep_nesting(capsys):
    code, out = run_with(capsys, [], "not " * 5000 + "a\n")
    assert code == 1
    assert out[-1] == "Parsing Error: expression nested too deeply"
