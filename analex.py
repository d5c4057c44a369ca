import ply.lex as lex

from erros import LexError

# Palavras reservadas (comparadas em maiúsculas)
reserved = ['BEGIN', 'END', 'VAR', 'PROGRAM', 'PROCEDURE', 'DIV', 'INTEGER', 'REAL']

tokens = [
    'INTEGER_CONST', 'REAL_CONST', 'ID',
    'PLUS', 'MINUS', 'MUL', 'FLOAT_DIV',
    'LPAREN', 'RPAREN', 'SEMI', 'DOT', 'COMMA', 'COLON', 'ASSIGN',
] + reserved

t_PLUS      = r'\+'
t_MINUS     = r'-'
t_MUL       = r'\*'
t_FLOAT_DIV = r'/'
t_LPAREN    = r'\('
t_RPAREN    = r'\)'
t_SEMI      = r';'
t_DOT       = r'\.'
t_COMMA     = r','
t_ASSIGN    = r':='
t_COLON     = r':'

t_ignore = ' \t\r'


def find_column(data, lexpos):
    line_start = data.rfind('\n', 0, lexpos) + 1
    return lexpos - line_start + 1


def t_COMMENT(t):
    r'\{[^}]*\}'
    # comentários podem ocupar várias linhas
    t.lexer.lineno += t.value.count('\n')


def t_REAL_CONST(t):
    r'\d+\.\d+'
    return t


def t_INTEGER_CONST(t):
    r'\d+'
    return t


def t_ID(t):
    r'[A-Za-z_][A-Za-z0-9_]*'
    t_upper = t.value.upper()
    t.type = t_upper if t_upper in reserved else 'ID'
    return t


def t_newline(t):
    r'\n+'
    t.lexer.lineno += len(t.value)


def t_error(t):
    raise LexError(t.value[0], t.lineno, find_column(t.lexer.lexdata, t.lexpos))


lexer = lex.lex()


class Token:
    def __init__(self, type_, value, lineno, column):
        self.type = type_
        self.value = value
        self.lineno = lineno
        self.column = column

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.lineno, self.column) == \
               (other.type, other.value, other.lineno, other.column)

    def __repr__(self):
        return f"Token({self.type}, {self.value!r}, {self.lineno}, {self.column})"


def tokenize(data):
    """
    Converte o texto fonte numa lista de Tokens terminada em EOF.
    Cada chamada usa um clone do lexer, logo não há estado partilhado entre execuções.
    """
    lx = lexer.clone()
    lx.lineno = 1
    lx.input(data)

    result = []
    for tok in lx:
        result.append(Token(tok.type, tok.value, tok.lineno, find_column(data, tok.lexpos)))

    result.append(Token('EOF', 'EOF', lx.lineno, find_column(data, len(data))))
    return result


def format_tokens(toks):
    return "\n".join(f"Token[{i}] := {{{tok.type}}} '{tok.value}'" for i, tok in enumerate(toks))
