class Node:
    # posição do token que define o nó (para diagnósticos)
    lineno = None
    column = None

    def at(self, token):
        self.lineno = token.lineno
        self.column = token.column
        return self


#
# Programa e bloco
#

class Program(Node):
    def __init__(self, name, block):
        self.name = name
        self.block = block

class Block(Node):
    def __init__(self, declarations, compound):
        self.declarations = declarations  # lista de VarDecl / ProcDecl, pela ordem do texto
        self.compound = compound          # Compound


#
# Declarações
#

class VarDecl(Node):
    def __init__(self, name, type_name):
        self.name = name
        self.type_name = type_name

class Param(Node):
    def __init__(self, name, type_name):
        self.name = name
        self.type_name = type_name

class ProcDecl(Node):
    def __init__(self, name, params, block):
        self.name = name
        self.params = params or []  # lista de Param
        self.block = block


#
# Instruções
#

class Compound(Node):
    def __init__(self, statements):
        self.statements = statements or []

class Assign(Node):
    def __init__(self, target, expr):
        self.target = target  # Var
        self.expr = expr


#
# Expressões
#

class BinOp(Node):
    ADD_OPS = ('PLUS', 'MINUS')
    MUL_OPS = ('MUL', 'DIV', 'FLOAT_DIV')
    OPS = ADD_OPS + MUL_OPS

    def __init__(self, left, op, right):
        self.left = left
        self.op = op  # um de BinOp.OPS
        self.right = right

class UnaryOp(Node):
    def __init__(self, op, expr):
        self.op = op  # PLUS ou MINUS
        self.expr = expr

class Literal(Node):
    INTEGER = 'INTEGER'
    REAL = 'REAL'

    def __init__(self, kind, text):
        self.kind = kind
        self.text = text

    @property
    def value(self):
        return int(self.text) if self.kind == Literal.INTEGER else float(self.text)

class Var(Node):
    def __init__(self, name):
        self.name = name


NODE_TYPES = (
    Program, Block, VarDecl, Param, ProcDecl,
    Compound, Assign, BinOp, UnaryOp, Literal, Var,
)
