import unittest

from anasin import parse
from ast1 import *
from erros import PascalSyntaxError


def body(statements_src, decls=""):
    return parse(f"PROGRAM Test; {decls} BEGIN {statements_src} END.")


def first_expr(expr_src):
    return body(f"x := {expr_src}").block.compound.statements[0].expr


class TestParser(unittest.TestCase):
    def test_program_shape(self):
        tree = parse("PROGRAM Test; VAR a, b : INTEGER; c : REAL; BEGIN a := 2; b := a + 3 * 2; END.")
        self.assertIsInstance(tree, Program)
        self.assertEqual(tree.name, "Test")
        decls = tree.block.declarations
        self.assertEqual([(d.name, d.type_name) for d in decls],
                         [("a", "INTEGER"), ("b", "INTEGER"), ("c", "REAL")])
        stmts = tree.block.compound.statements
        self.assertEqual(len(stmts), 2)
        self.assertIsInstance(stmts[1], Assign)
        self.assertEqual(stmts[1].target.name, "b")

    def test_empty_compound(self):
        tree = parse("PROGRAM Test; BEGIN END.")
        self.assertEqual(tree.block.declarations, [])
        self.assertEqual(tree.block.compound.statements, [])

    def test_empty_statements_are_dropped(self):
        stmts = body("; a := 1; ; BEGIN END;").block.compound.statements
        self.assertEqual(len(stmts), 2)
        self.assertIsInstance(stmts[0], Assign)
        self.assertIsInstance(stmts[1], Compound)

    def test_precedence(self):
        expr = first_expr("1 + 2 * 3")
        self.assertEqual(expr.op, "PLUS")
        self.assertIsInstance(expr.left, Literal)
        self.assertEqual(expr.right.op, "MUL")

    def test_left_associativity(self):
        expr = first_expr("8 - 4 - 2")
        self.assertEqual(expr.op, "MINUS")
        self.assertEqual(expr.left.op, "MINUS")
        self.assertEqual(expr.right.text, "2")

    def test_parentheses(self):
        expr = first_expr("(1 + 2) DIV 3")
        self.assertEqual(expr.op, "DIV")
        self.assertEqual(expr.left.op, "PLUS")

    def test_nested_unary(self):
        expr = first_expr("--y")
        self.assertIsInstance(expr, UnaryOp)
        self.assertEqual(expr.op, "MINUS")
        self.assertIsInstance(expr.expr, UnaryOp)
        self.assertIsInstance(expr.expr.expr, Var)

    def test_literal_kinds(self):
        expr = first_expr("1 / 2.5")
        self.assertEqual(expr.op, "FLOAT_DIV")
        self.assertEqual((expr.left.kind, expr.left.value), (Literal.INTEGER, 1))
        self.assertEqual((expr.right.kind, expr.right.value), (Literal.REAL, 2.5))

    def test_procedure_declarations(self):
        tree = parse("""
            PROGRAM Main;
            VAR x : REAL;
            PROCEDURE Alpha(a, b : INTEGER; c : REAL);
            VAR y : INTEGER;
                PROCEDURE Beta;
                BEGIN END;
            BEGIN
                y := a
            END;
            PROCEDURE Gamma;
            BEGIN END;
            BEGIN
            END.
        """)
        decls = tree.block.declarations
        self.assertIsInstance(decls[0], VarDecl)
        alpha, gamma = decls[1], decls[2]
        self.assertEqual(alpha.name, "Alpha")
        self.assertEqual([(p.name, p.type_name) for p in alpha.params],
                         [("a", "INTEGER"), ("b", "INTEGER"), ("c", "REAL")])
        self.assertEqual(alpha.block.declarations[0].name, "y")
        self.assertEqual(alpha.block.declarations[1].name, "Beta")
        self.assertEqual(gamma.params, [])

    def test_node_positions(self):
        tree = parse("PROGRAM Test;\nBEGIN\n  x := 1\nEND.")
        assign = tree.block.compound.statements[0]
        self.assertEqual((assign.target.lineno, assign.target.column), (3, 3))

    def test_binary_operators(self):
        produced = {first_expr(f"1 {symbol} 2").op for symbol in ("+", "-", "*", "DIV", "/")}
        self.assertEqual(produced, set(BinOp.OPS))

    def test_missing_final_dot(self):
        with self.assertRaises(PascalSyntaxError) as ctx:
            parse("PROGRAM Test; VAR a : INTEGER; BEGIN a := 1 END")
        err = ctx.exception
        self.assertEqual(err.expected, "DOT")
        self.assertTrue(err.actual.startswith("EOF"))
        self.assertEqual(err.kind, "SyntaxError")

    def test_trailing_tokens(self):
        with self.assertRaises(PascalSyntaxError) as ctx:
            parse("PROGRAM Test; BEGIN END. x")
        self.assertEqual(ctx.exception.expected, "EOF")

    def test_missing_separator(self):
        with self.assertRaises(PascalSyntaxError) as ctx:
            body("a := 1 b := 2")
        self.assertEqual(ctx.exception.expected, "END")

    def test_bad_factor(self):
        with self.assertRaises(PascalSyntaxError) as ctx:
            body("a := * 2")
        self.assertEqual(ctx.exception.expected, "expression")

    def test_bad_type(self):
        with self.assertRaises(PascalSyntaxError) as ctx:
            parse("PROGRAM Test; VAR a : x; BEGIN END.")
        self.assertEqual(ctx.exception.expected, "INTEGER or REAL")

    def test_var_without_declarations(self):
        with self.assertRaises(PascalSyntaxError) as ctx:
            parse("PROGRAM Test; VAR BEGIN END.")
        self.assertEqual(ctx.exception.expected, "ID")


if __name__ == '__main__':
    unittest.main()
