'''
P1:  program            -> PROGRAM ID SEMI block DOT
P2:  block              -> declarations compound_statement
P3:  declarations       -> ( VAR var_decl_group+ )? proc_decl*
P4:  var_decl_group     -> ID (COMMA ID)* COLON type_spec SEMI
P5:  proc_decl          -> PROCEDURE ID ( LPAREN formal_params RPAREN )? SEMI block SEMI
P6:  formal_params      -> param_group (SEMI param_group)*
P7:  param_group        -> ID (COMMA ID)* COLON type_spec
P8:  type_spec          -> INTEGER | REAL
P9:  compound_statement -> BEGIN statement_list END
P10: statement_list     -> statement (SEMI statement)*
P11: statement          -> compound_statement | assignment_statement | epsilon
P12: assignment         -> variable ASSIGN expr
P13: expr               -> term ((PLUS | MINUS) term)*
P14: term               -> factor ((MUL | DIV | FLOAT_DIV) factor)*
P15: factor             -> PLUS factor | MINUS factor | INTEGER_CONST | REAL_CONST
                         | LPAREN expr RPAREN | variable
P16: variable           -> ID
'''

from analex import tokenize
from ast1 import *
from erros import PascalSyntaxError


class Parser:
    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0
        self.prox_simb = tokens[0]

    def parserError(self, expected):
        simb = self.prox_simb
        raise PascalSyntaxError(expected, f"{simb.type} '{simb.value}'", simb.lineno, simb.column)

    def digest(self, simb):
        # único ponto de consumo: avança só se o token atual for do tipo esperado
        if self.prox_simb.type != simb:
            self.parserError(simb)
        tok = self.prox_simb
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
            self.prox_simb = self.tokens[self.pos]
        return tok

    def parse(self):
        tree = self.rec_program()
        self.digest('EOF')
        return tree

    # P1: program -> PROGRAM ID SEMI block DOT
    def rec_program(self):
        start = self.digest('PROGRAM')
        name = self.digest('ID').value
        self.digest('SEMI')
        block = self.rec_block()
        self.digest('DOT')
        return Program(name, block).at(start)

    # P2: block -> declarations compound_statement
    def rec_block(self):
        start = self.prox_simb
        declarations = self.rec_declarations()
        compound = self.rec_compound_statement()
        return Block(declarations, compound).at(start)

    # P3: declarations -> ( VAR var_decl_group+ )? proc_decl*
    def rec_declarations(self):
        declarations = []
        if self.prox_simb.type == 'VAR':
            self.digest('VAR')
            declarations.extend(self.rec_var_decl_group())
            while self.prox_simb.type == 'ID':
                declarations.extend(self.rec_var_decl_group())
        while self.prox_simb.type == 'PROCEDURE':
            declarations.append(self.rec_proc_decl())
        return declarations

    # P4: var_decl_group -> ID (COMMA ID)* COLON type_spec SEMI
    def rec_var_decl_group(self):
        decls = [VarDecl(name_tok.value, type_tok.value.upper()).at(name_tok)
                 for name_tok, type_tok in self.rec_typed_names()]
        self.digest('SEMI')
        return decls

    # P5: proc_decl -> PROCEDURE ID ( LPAREN formal_params RPAREN )? SEMI block SEMI
    def rec_proc_decl(self):
        self.digest('PROCEDURE')
        name_tok = self.digest('ID')
        params = []
        if self.prox_simb.type == 'LPAREN':
            self.digest('LPAREN')
            params = self.rec_formal_params()
            self.digest('RPAREN')
        self.digest('SEMI')
        block = self.rec_block()
        self.digest('SEMI')
        return ProcDecl(name_tok.value, params, block).at(name_tok)

    # P6: formal_params -> param_group (SEMI param_group)*
    def rec_formal_params(self):
        params = self.rec_param_group()
        while self.prox_simb.type == 'SEMI':
            self.digest('SEMI')
            params.extend(self.rec_param_group())
        return params

    # P7: param_group -> ID (COMMA ID)* COLON type_spec
    def rec_param_group(self):
        return [Param(name_tok.value, type_tok.value.upper()).at(name_tok)
                for name_tok, type_tok in self.rec_typed_names()]

    # partilhado por P4 e P7: ID (COMMA ID)* COLON type_spec
    def rec_typed_names(self):
        names = [self.digest('ID')]
        while self.prox_simb.type == 'COMMA':
            self.digest('COMMA')
            names.append(self.digest('ID'))
        self.digest('COLON')
        type_tok = self.rec_type_spec()
        return [(name, type_tok) for name in names]

    # P8: type_spec -> INTEGER | REAL
    def rec_type_spec(self):
        if self.prox_simb.type == 'INTEGER':
            return self.digest('INTEGER')
        if self.prox_simb.type == 'REAL':
            return self.digest('REAL')
        self.parserError('INTEGER or REAL')

    # P9: compound_statement -> BEGIN statement_list END
    def rec_compound_statement(self):
        start = self.digest('BEGIN')
        statements = self.rec_statement_list()
        self.digest('END')
        return Compound(statements).at(start)

    # P10: statement_list -> statement (SEMI statement)*
    def rec_statement_list(self):
        statements = []
        stmt = self.rec_statement()
        if stmt is not None:
            statements.append(stmt)
        while self.prox_simb.type == 'SEMI':
            self.digest('SEMI')
            stmt = self.rec_statement()
            if stmt is not None:
                statements.append(stmt)
        return statements

    # P11: statement -> compound_statement | assignment_statement | epsilon
    def rec_statement(self):
        if self.prox_simb.type == 'BEGIN':
            return self.rec_compound_statement()
        if self.prox_simb.type == 'ID':
            return self.rec_assignment()
        # instrução vazia: não gera nó
        return None

    # P12: assignment -> variable ASSIGN expr
    def rec_assignment(self):
        target = self.rec_variable()
        op = self.digest('ASSIGN')
        return Assign(target, self.rec_expr()).at(op)

    # P13: expr -> term ((PLUS | MINUS) term)*
    def rec_expr(self):
        node = self.rec_term()
        while self.prox_simb.type in BinOp.ADD_OPS:
            op = self.digest(self.prox_simb.type)
            node = BinOp(node, op.type, self.rec_term()).at(op)
        return node

    # P14: term -> factor ((MUL | DIV | FLOAT_DIV) factor)*
    def rec_term(self):
        node = self.rec_factor()
        while self.prox_simb.type in BinOp.MUL_OPS:
            op = self.digest(self.prox_simb.type)
            node = BinOp(node, op.type, self.rec_factor()).at(op)
        return node

    # P15: factor -> PLUS factor | MINUS factor | INTEGER_CONST | REAL_CONST
    #              | LPAREN expr RPAREN | variable
    def rec_factor(self):
        simb = self.prox_simb
        if simb.type in ('PLUS', 'MINUS'):
            self.digest(simb.type)
            return UnaryOp(simb.type, self.rec_factor()).at(simb)
        if simb.type == 'INTEGER_CONST':
            self.digest('INTEGER_CONST')
            return Literal(Literal.INTEGER, simb.value).at(simb)
        if simb.type == 'REAL_CONST':
            self.digest('REAL_CONST')
            return Literal(Literal.REAL, simb.value).at(simb)
        if simb.type == 'LPAREN':
            self.digest('LPAREN')
            node = self.rec_expr()
            self.digest('RPAREN')
            return node
        if simb.type == 'ID':
            return self.rec_variable()
        self.parserError('expression')

    # P16: variable -> ID
    def rec_variable(self):
        tok = self.digest('ID')
        return Var(tok.value).at(tok)


def parse(data):
    return Parser(tokenize(data)).parse()
