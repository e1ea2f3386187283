import json

from main import main, process_expression
from ast_nodes import BinaryOpNode


def test_default_expression_prints_tokens_and_ast(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Tokens (14):" in out
    assert "BinaryOp(+)" in out
    assert "right: BinaryOp(*)" in out


def test_process_expression_returns_ast(capsys):
    ast = process_expression("1 + 2", print_ast=False)
    assert isinstance(ast, BinaryOpNode)
    assert capsys.readouterr().out == ""


def test_tokenization_error_is_reported(capsys):
    assert process_expression("1 + x") is None
    assert "Tokenization Error: Lexical error: Unrecognized character 'x'" in (
        capsys.readouterr().out
    )


def test_parse_error_is_reported(capsys):
    assert main(["(2 + 3"]) == 1
    assert "Parse Error: Expected ')' but found end of input" in capsys.readouterr().out


def test_strict_flag(capsys):
    assert main(["2 + 3)"]) == 0
    assert main(["--strict", "2 + 3)"]) == 1
    assert "Unexpected trailing token" in capsys.readouterr().out


def test_surface_flag(capsys):
    main(["--no-ast", "--surface", "8 - 3 - 2"])
    out = capsys.readouterr().out
    assert "((8 - 3) - 2)" in out
    assert "BinaryOp" not in out


def test_file_input_and_json_dump(tmp_path, capsys):
    src = tmp_path / "expr.txt"
    src.write_text("6 / 3\n", encoding="utf-8")
    out_json = tmp_path / "ast.json"

    assert main(["--file", str(src), "--no-ast", "--dump-ast", str(out_json)]) == 0
    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["operator"] == "/"
    assert data["left"] == {"node_type": "IntLiteral", "value": 6}


def test_missing_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "nope.txt")]) == 1
    assert "Failed to read file" in capsys.readouterr().out


def test_interactive_mode(monkeypatch, capsys):
    inputs = iter(["1 * 2", "", "1 +", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    assert main(["-i", "--no-ast", "--surface"]) == 0
    out = capsys.readouterr().out
    assert "(1 * 2)" in out
    assert "Parse Error: Unexpected end of input" in out
    assert "Goodbye!" in out


def test_long_operator_chain_is_printed(capsys):
    ast = process_expression("+".join(["1"] * 1500), print_surface=True)
    assert isinstance(ast, BinaryOpNode)
    out = capsys.readouterr().out
    assert "Unexpected error" not in out
    assert "BinaryOp(+)" in out


def test_unexpected_error_is_reported_and_repl_continues(monkeypatch, capsys):
    def broken_print_ast(node, indent=0, prefix=""):
        raise RuntimeError("printer broke")

    monkeypatch.setattr("main.PrettyPrinter.print_ast", broken_print_ast)
    inputs = iter(["1 + 2", "3 * 4", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    assert main(["-i"]) == 0
    out = capsys.readouterr().out
    assert out.count("Unexpected error: printer broke") == 2
    assert "Goodbye!" in out


def test_viz_flag_renders_ast(monkeypatch, tmp_path, capsys):
    rendered = []

    def fake_write_and_render(node, out_path, fmt="svg"):
        rendered.append((node, out_path, fmt))
        return f"{out_path}.{fmt}"

    monkeypatch.setattr("main.write_and_render", fake_write_and_render)
    out_path = str(tmp_path / "ast")
    assert main(["--no-ast", "--viz-ast", out_path, "--viz-format", "png", "1 + 2"]) == 0

    assert len(rendered) == 1
    node, path, fmt = rendered[0]
    assert isinstance(node, BinaryOpNode)
    assert (path, fmt) == (out_path, "png")
    assert f"Wrote AST visualization to {out_path}.png" in capsys.readouterr().out


def test_viz_render_failure_is_reported(monkeypatch, tmp_path, capsys):
    def failing_write_and_render(node, out_path, fmt="svg"):
        raise RuntimeError("dot executable not found")

    monkeypatch.setattr("main.write_and_render", failing_write_and_render)
    out_path = str(tmp_path / "ast")
    assert main(["--no-ast", "--viz-ast", out_path, "1 + 2"]) == 0
    out = capsys.readouterr().out
    assert (
        f"Failed to render AST visualization to {out_path}: dot executable not found"
        in out
    )
