# erros.py
# Erros do interpretador. Todos são fatais: o primeiro erro aborta a execução.


class PascalError(Exception):
    kind = 'Error'

    def __init__(self, message, lineno=None, column=None):
        super().__init__(message)
        self.message = message
        self.lineno = lineno
        self.column = column

    def position(self):
        parts = []
        if self.lineno is not None:
            parts.append(f"line {self.lineno}")
        if self.column is not None:
            parts.append(f"col {self.column}")
        return ", ".join(parts)

    def __str__(self):
        pos = self.position()
        return f"{self.kind}: {self.message} [{pos}]" if pos else f"{self.kind}: {self.message}"


class LexError(PascalError):
    kind = 'LexError'

    def __init__(self, char, lineno, column):
        super().__init__(f"unexpected character {char!r}", lineno, column)
        self.char = char


class PascalSyntaxError(PascalError):
    kind = 'SyntaxError'

    def __init__(self, expected, actual, lineno=None, column=None):
        super().__init__(f"expected {expected}, found {actual}", lineno, column)
        self.expected = expected
        self.actual = actual


class SemanticError(PascalError):
    kind = 'SemanticError'

    def __init__(self, message, name=None, lineno=None, column=None):
        # message é a categoria ('undeclared', 'already declared', ...)
        text = f"{message} '{name}'" if name is not None else message
        super().__init__(text, lineno, column)
        self.reason = message
        self.name = name


class PascalRuntimeError(PascalError):
    kind = 'RuntimeError'

    def __init__(self, message, name=None, lineno=None, column=None):
        text = f"{message} '{name}'" if name is not None else message
        super().__init__(text, lineno, column)
        self.reason = message
        self.name = name
