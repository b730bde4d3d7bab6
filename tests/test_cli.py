from my_calculator.cmd.main import app


def test_eval_argument(runner):
    result = runner.invoke(app, ["eval", "2 + 3 * 4"])
    assert result.exit_code == 0
    assert result.output == "14\n"


def test_eval_negative_expression(runner):
    result = runner.invoke(app, ["eval", "-2 * 3"])
    assert result.exit_code == 0
    assert result.output == "-6\n"


def test_eval_error_exit_code(runner):
    result = runner.invoke(app, ["eval", "1 / 0"])
    assert result.exit_code == 1
    assert "division by zero" in result.output
    assert "  ^" in result.output


def test_eval_syntax_error_points_at_token(runner):
    result = runner.invoke(app, ["eval", "2 + )"])
    assert result.exit_code == 1
    assert "    ^ syntax error: unexpected token ')'" in result.output


def test_eval_reads_stdin(runner):
    result = runner.invoke(app, ["eval"], input="1 + 1\n\n(2 + 3) * 4\n")
    assert result.exit_code == 0
    assert result.output == "2\n20\n"


def test_eval_stdin_reports_failures(runner):
    result = runner.invoke(app, ["eval"], input="1 + 1\n2 +\n3\n")
    assert result.exit_code == 1
    assert "2\n" in result.output
    assert "expression ends too early" in result.output
    assert result.output.rstrip().endswith("3")


def test_eval_angle_mode_option(runner):
    result = runner.invoke(app, ["eval", "--angle-mode", "radians", "cos(0)"])
    assert result.exit_code == 0
    assert result.output == "1\n"


def test_eval_angle_mode_from_environment(runner, monkeypatch):
    monkeypatch.setenv("MY_CALCULATOR_ANGLE_MODE", "radians")
    result = runner.invoke(app, ["eval", "sin(π / 2)"])
    assert result.exit_code == 0
    assert result.output == "1\n"


def test_eval_max_depth_option(runner):
    result = runner.invoke(app, ["eval", "--max-depth", "1", "((1))"])
    assert result.exit_code == 1
    assert "nested deeper than 1" in result.output


def test_eval_invalid_max_depth(runner):
    result = runner.invoke(app, ["eval", "--max-depth", "0", "1"])
    assert result.exit_code != 0


def test_verbose_flag(runner):
    result = runner.invoke(app, ["--verbose", "eval", "1"])
    assert result.exit_code == 0


def test_convert(runner):
    result = runner.invoke(app, ["convert", "-40", "celsius", "fahrenheit"])
    assert result.exit_code == 0
    assert result.output == "-40 Fahrenheit\n"


def test_convert_expression(runner):
    result = runner.invoke(app, ["convert", "2 * 6", "inch", "foot"])
    assert result.exit_code == 0
    assert result.output == "1 Foot\n"


def test_convert_unknown_unit(runner):
    result = runner.invoke(app, ["convert", "1", "furlong", "metre"])
    assert result.exit_code == 1
    assert "unknown unit 'furlong'" in result.output


def test_convert_mismatched_dimensions(runner):
    result = runner.invoke(app, ["convert", "1", "metre", "gram"])
    assert result.exit_code == 1
    assert "cannot convert length" in result.output


def test_units(runner):
    result = runner.invoke(app, ["units", "temperature"])
    assert result.exit_code == 0
    assert result.output == "temperature:\n  Celsius (metric)\n  Kelvin (metric)\n  Fahrenheit (metric)\n"


def test_functions(runner):
    result = runner.invoke(app, ["functions"])
    assert result.exit_code == 0
    assert "  sqrt(x)\n" in result.output
    assert "  pi = 3.141592653589793\n" in result.output


def test_eval_tree(runner):
    result = runner.invoke(app, ["eval", "--tree", "2 + 3 * 4"])
    assert result.exit_code == 0
    assert result.output == "(+ 2 (* 3 4))\n14\n"
