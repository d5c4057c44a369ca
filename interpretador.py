# interpretador.py
# Interpretação direta da árvore (pós-ordem), depois de a análise semântica ter passado.
import math
import operator

from analex import tokenize
from anasem import SemanticAnalyzer
from anasin import Parser
from ast1 import *
from erros import PascalRuntimeError


def int_div(left, right):
    # DIV trunca em direção a zero, como em Pascal
    if isinstance(left, int) and isinstance(right, int):
        q = abs(left) // abs(right)
        return q if (left >= 0) == (right >= 0) else -q
    q = left / right
    if not math.isfinite(q):
        raise OverflowError("non-finite DIV operand")
    return math.trunc(q)


# um operador por cada BinOp.OPS
OPERATORS = {
    'PLUS':      operator.add,
    'MINUS':     operator.sub,
    'MUL':       operator.mul,
    'DIV':       int_div,
    'FLOAT_DIV': operator.truediv,
}


class Interpreter:
    def __init__(self, store=None):
        self.store = {} if store is None else store  # nome (maiúsculas) -> valor
        self.types = {}                              # nome (maiúsculas) -> tipo declarado
        self.handlers = {
            Program:  self.visit_program,
            Block:    self.visit_block,
            VarDecl:  self.visit_var_decl,
            Param:    self.visit_param,
            ProcDecl: self.visit_proc_decl,
            Compound: self.visit_compound,
            Assign:   self.visit_assign,
            BinOp:    self.visit_binop,
            UnaryOp:  self.visit_unaryop,
            Literal:  self.visit_literal,
            Var:      self.visit_var,
        }

    def interpret(self, tree):
        self.visit(tree)
        return self.store

    def visit(self, node):
        return self.handlers[type(node)](node)

    def visit_program(self, node):
        self.visit(node.block)

    def visit_block(self, node):
        for decl in node.declarations:
            self.visit(decl)
        self.visit(node.compound)

    def visit_var_decl(self, node):
        self.types[node.name.upper()] = node.type_name

    def visit_param(self, node):
        pass

    def visit_proc_decl(self, node):
        # não há chamadas de procedimentos: o corpo nunca é executado
        pass

    def visit_compound(self, node):
        for stmt in node.statements:
            self.visit(stmt)

    def visit_assign(self, node):
        self.store[node.target.name.upper()] = self.visit(node.expr)

    def visit_binop(self, node):
        left = self.visit(node.left)
        right = self.visit(node.right)
        if node.op in ('DIV', 'FLOAT_DIV') and right == 0:
            raise PascalRuntimeError("division by zero", lineno=node.lineno, column=node.column)
        try:
            return OPERATORS[node.op](left, right)
        except (OverflowError, ValueError):
            raise PascalRuntimeError("numeric overflow", lineno=node.lineno, column=node.column)

    def visit_unaryop(self, node):
        value = self.visit(node.expr)
        return -value if node.op == 'MINUS' else +value

    def visit_literal(self, node):
        try:
            return node.value
        except ValueError:
            # int() recusa textos acima de sys.get_int_max_str_digits()
            raise PascalRuntimeError("integer literal too large", lineno=node.lineno, column=node.column)

    def visit_var(self, node):
        key = node.name.upper()
        if key not in self.store:
            raise PascalRuntimeError("undeclared", node.name, node.lineno, node.column)
        return self.store[key]


class Result:
    def __init__(self, tokens, tree, global_scope, store, types):
        self.tokens = tokens
        self.tree = tree
        self.global_scope = global_scope
        self.store = store
        self.types = types

    def format_bindings(self):
        lines = []
        for name, value in self.store.items():
            type_name = self.types.get(name)
            lines.append(f"{name} = {value} ({type_name})" if type_name else f"{name} = {value}")
        return "\n".join(lines)


def run(data, verbose=False):
    """
    Executa o pipeline completo sobre o texto fonte:
    análise léxica, sintática, semântica e interpretação.
    O primeiro erro (PascalError) é propagado a quem chama.
    """
    tokens = tokenize(data)
    tree = Parser(tokens).parse()
    global_scope = SemanticAnalyzer(verbose).analyze(tree)
    interpreter = Interpreter()
    interpreter.interpret(tree)
    return Result(tokens, tree, global_scope, interpreter.store, interpreter.types)
