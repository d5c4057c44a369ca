# anasem.py
# Análise semântica: uma única travessia da árvore antes da interpretação.
from ast1 import *
from erros import SemanticError
from simbolos import BUILTIN_TYPE, VARIABLE, ProcedureSymbol, ScopeManager, VarSymbol


class SemanticAnalyzer:
    def __init__(self, verbose=False):
        self.scopes = ScopeManager()
        self.verbose = verbose
        # um handler por tipo de nó; o conjunto tem de coincidir com NODE_TYPES
        self.handlers = {
            Program:  self.check_program,
            Block:    self.check_block,
            VarDecl:  self.check_var_decl,
            Param:    self.check_param,
            ProcDecl: self.check_proc_decl,
            Compound: self.check_compound,
            Assign:   self.check_assign,
            BinOp:    self.check_binop,
            UnaryOp:  self.check_unaryop,
            Literal:  self.check_literal,
            Var:      self.check_var,
        }

    def trace(self, msg):
        if self.verbose:
            print(msg)

    def analyze(self, tree):
        self.check(tree)
        return self.scopes.global_scope

    def check(self, node):
        return self.handlers[type(node)](node)

    # ---------- programa e blocos ----------
    def check_program(self, node):
        self.check(node.block)

    def check_block(self, node):
        for decl in node.declarations:
            self.check(decl)
        self.check(node.compound)

    # ---------- declarações ----------
    def resolve_type(self, node):
        type_symbol = self.scopes.lookup(node.type_name)
        if type_symbol is None or type_symbol.kind != BUILTIN_TYPE:
            raise SemanticError("unknown type", node.type_name, node.lineno, node.column)
        return type_symbol

    def declare(self, node, symbol):
        if self.scopes.lookup(node.name, current_scope_only=True) is not None:
            raise SemanticError("already declared", node.name, node.lineno, node.column)
        self.scopes.define(symbol)
        return symbol

    def check_var_decl(self, node):
        type_symbol = self.resolve_type(node)
        self.declare(node, VarSymbol(node.name, type_symbol))

    def check_param(self, node):
        type_symbol = self.resolve_type(node)
        return self.declare(node, VarSymbol(node.name, type_symbol))

    def check_proc_decl(self, node):
        proc_symbol = self.declare(node, ProcedureSymbol(node.name))

        self.scopes.enter_scope(node.name)
        self.trace(f"ENTER scope: {node.name}")
        for param in node.params:
            proc_symbol.params.append(self.check(param))
        self.check(node.block)

        self.trace(str(self.scopes.current))
        self.scopes.leave_scope()
        self.trace(f"LEAVE scope: {node.name}")

    # ---------- instruções ----------
    def check_compound(self, node):
        for stmt in node.statements:
            self.check(stmt)

    def check_assign(self, node):
        self.check(node.target)
        self.check(node.expr)

    # ---------- expressões ----------
    def check_binop(self, node):
        self.check(node.left)
        self.check(node.right)

    def check_unaryop(self, node):
        self.check(node.expr)

    def check_literal(self, node):
        pass

    def check_var(self, node):
        symbol = self.scopes.lookup(node.name)
        if symbol is None:
            raise SemanticError("undeclared", node.name, node.lineno, node.column)
        if symbol.kind != VARIABLE:
            raise SemanticError("not a variable", node.name, node.lineno, node.column)


def analyze(tree, verbose=False):
    return SemanticAnalyzer(verbose).analyze(tree)
