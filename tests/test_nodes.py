from pseudocode.lexer import TokenType
from pseudocode.nodes import (
    AssignNode,
    BinaryExpr,
    CodeGenContext,
    ForNode,
    IfNode,
    IndexExpr,
    InputNode,
    LiteralExpr,
    OutputExprNode,
    OutputNode,
    ProgramNode,
    RepeatUntilNode,
    VariableExpr,
    WhileNode,
)


def num(value):
    return LiteralExpr(value, TokenType.NUMBER)


def var(name):
    return VariableExpr(name)


def string_ctx(*names):
    return CodeGenContext(variables=set(names), string_vars=set(names))


def test_variable_renders_name():
    ctx = CodeGenContext()
    assert var("abc").generate(ctx) == "abc"
    assert str(var("abc")) == "abc"


def test_string_literal_is_quoted():
    lit = LiteralExpr("hi", TokenType.STRING)
    assert str(lit) == '"hi"'
    assert lit.generate(CodeGenContext()) == '"hi"'


def test_number_literal_plain():
    assert num("42").generate(CodeGenContext()) == "42"


def test_plain_binary_generate_matches_str():
    expr = BinaryExpr("*", var("a"), BinaryExpr("-", num("3"), var("b")))
    assert expr.generate(CodeGenContext()) == str(expr)


def test_comparison_wraps_string_vars_in_stoi():
    expr = BinaryExpr("<", var("a"), num("3"))
    assert expr.generate(string_ctx("a")) == "(stoi(a) < 3)"


def test_modulo_with_string_var():
    expr = BinaryExpr("%", num("7"), var("s"))
    assert expr.generate(string_ctx("s")) == "(7 % stoi(s))"


def test_plus_with_left_string_var():
    expr = BinaryExpr("+", var("s"), num("1"))
    assert expr.generate(string_ctx("s")) == "s + to_string(1)"


def test_plus_with_right_string_var():
    expr = BinaryExpr("+", num("1"), var("s"))
    assert expr.generate(string_ctx("s")) == "to_string(1) + s"


def test_plus_with_both_string_vars():
    expr = BinaryExpr("+", var("s"), var("t"))
    assert expr.generate(string_ctx("s", "t")) == "s + t"


def test_index_expr():
    expr = IndexExpr(var("arr"), var("i"))
    assert str(expr) == "arr[i]"
    assert expr.generate(CodeGenContext()) == "arr[i]"
    assert expr.generate(string_ctx("i")) == "arr[stoi(i)]"


def test_input_declares_once():
    ctx = CodeGenContext()
    node = InputNode("name")
    first = node.generate(ctx)
    second = node.generate(ctx)
    assert first == "\tstring name;\n\tcin >> name;\n"
    assert second == "\tcin >> name;\n"
    assert "name" in ctx.string_vars
    assert "name" in ctx.variables


def test_output_node_string_and_value():
    ctx = CodeGenContext()
    assert OutputNode("hi", TokenType.STRING).generate(ctx) == '\tcout << "hi" << endl;\n'
    assert OutputNode("x", TokenType.IDENTIFIER).generate(ctx) == "\tcout << x << endl;\n"


def test_output_expr_node():
    code = OutputExprNode(var("x")).generate(CodeGenContext())
    assert code == "\tcout << x << endl;\n"


def test_assign_declares_then_reassigns():
    ctx = CodeGenContext()
    first = AssignNode("x", num("5"), "int").generate(ctx)
    second = AssignNode("x", num("6"), "int").generate(ctx)
    assert first == "\tint x = 5;\n"
    assert second == "\tx = 6;\n"
    assert "x" in ctx.variables
    assert "x" not in ctx.string_vars


def test_assign_string_type_marks_string_var():
    ctx = CodeGenContext()
    AssignNode("s", LiteralExpr("a", TokenType.STRING), "string").generate(ctx)
    assert "s" in ctx.string_vars


def test_assign_increment_of_string_var():
    ctx = string_ctx("x")
    code = AssignNode("x", BinaryExpr("+", var("x"), num("1")), "auto").generate(ctx)
    assert code == "\tx = to_string(stoi(x) + 1);\n"


def test_assign_non_plus_binary_to_string_var():
    ctx = string_ctx("x")
    code = AssignNode("x", BinaryExpr("*", var("a"), var("b")), "auto").generate(ctx)
    assert code == "\tx = to_string((a * b));\n"


def test_if_without_else():
    ctx = CodeGenContext()
    body = OutputExprNode(var("a"))
    code = IfNode(BinaryExpr(">", var("a"), num("1")), [body]).generate(ctx)
    assert code.startswith("\tif ((a > 1)) {\n")
    assert code.endswith("\t}\n")
    assert " else " not in code
    assert body.generate(ctx) in code


def test_if_with_else():
    ctx = CodeGenContext()
    code = IfNode(
        var("c"), [OutputExprNode(var("a"))], [OutputExprNode(var("b"))]
    ).generate(ctx)
    assert " else {\n" in code
    assert code.index("cout << a") < code.index("else") < code.index("cout << b")


def test_while_loop():
    code = WhileNode(var("c"), [OutputExprNode(var("a"))]).generate(CodeGenContext())
    assert code.startswith("\twhile (c) {\n")
    assert code.endswith("\t}\n")


def test_for_loop_plain_and_string_end():
    node = ForNode("i", "1", "n", "1", [])
    plain = node.generate(CodeGenContext())
    assert plain == "\tfor (int i = 1; i <= n; i += 1) {\n\t}\n"
    assert "i <= stoi(n)" in node.generate(string_ctx("n"))


def test_repeat_until_uses_text_form_of_condition():
    cond = BinaryExpr(">", var("s"), num("3"))
    code = RepeatUntilNode(cond, []).generate(string_ctx("s"))
    assert code.startswith("\tdo {\n")
    assert code.endswith(f"}} while (!({cond}));\n")
    assert "stoi" not in code


def test_program_shares_context_across_statements():
    program = ProgramNode([InputNode("x"), InputNode("x")])
    ctx = CodeGenContext()
    code = program.generate(ctx)
    assert code.count("\tstring x;\n") == 1
    assert code.count("cin >> x;") == 2


def test_empty_program_generates_nothing():
    assert ProgramNode().generate(CodeGenContext()) == ""