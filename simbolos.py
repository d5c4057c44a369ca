# simbolos.py
# Tabela de símbolos com scopes encadeados.
# Pascal não diferencia maiúsculas e minúsculas: as chaves são guardadas em maiúsculas.

BUILTIN_TYPE = 'BUILTIN_TYPE'
VARIABLE = 'VARIABLE'
PROCEDURE = 'PROCEDURE'


class Symbol:
    kind = None

    def __init__(self, name):
        self.name = name

    @property
    def key(self):
        return self.name.upper()


class BuiltinTypeSymbol(Symbol):
    kind = BUILTIN_TYPE

    def __str__(self):
        return self.name


class VarSymbol(Symbol):
    kind = VARIABLE

    def __init__(self, name, type_):
        super().__init__(name)
        self.type = type_  # BuiltinTypeSymbol

    def __str__(self):
        return f"{self.name}: <{self.type}>"


class ProcedureSymbol(Symbol):
    kind = PROCEDURE

    def __init__(self, name, params=None):
        super().__init__(name)
        self.params = params or []  # lista de VarSymbol

    def __str__(self):
        params = ", ".join(str(p) for p in self.params)
        return f"{self.name}: <{params}>"


class ScopedSymbolTable:
    def __init__(self, scope_name, scope_level, enclosing_scope=None):
        self.symbols = {}
        self.scope_name = scope_name
        self.scope_level = scope_level
        # referência só para lookup, o scope pai não pertence ao filho
        self.enclosing_scope = enclosing_scope

    def define(self, symbol):
        # sem verificação de duplicados: quem chama é que a faz (ver anasem)
        self.symbols[symbol.key] = symbol

    def lookup(self, name, current_scope_only=False):
        key = name.upper()
        scope = self
        while scope is not None:
            if key in scope.symbols:
                return scope.symbols[key]
            if current_scope_only:
                return None
            scope = scope.enclosing_scope
        return None

    def __str__(self):
        lines = [f"SymbolTable := {self.scope_name} at scope {self.scope_level}"]
        for symbol in self.symbols.values():
            lines.append(f"\t{symbol}")
        return "\n".join(lines)


class ScopeManager:
    """
    Gere a pilha de scopes da análise semântica.
    O scope global (nível 0) vive toda a execução e já traz os tipos INTEGER e REAL;
    os restantes são criados em enter_scope e descartados em leave_scope (LIFO).
    """

    def __init__(self):
        self.global_scope = ScopedSymbolTable('global', 0)
        self.global_scope.define(BuiltinTypeSymbol('INTEGER'))
        self.global_scope.define(BuiltinTypeSymbol('REAL'))
        self.scopes = [self.global_scope]

    @property
    def current(self):
        return self.scopes[-1]

    def define(self, symbol):
        self.current.define(symbol)

    def lookup(self, name, current_scope_only=False):
        return self.current.lookup(name, current_scope_only)

    def enter_scope(self, name):
        scope = ScopedSymbolTable(name, self.current.scope_level + 1, self.current)
        self.scopes.append(scope)
        return scope

    def leave_scope(self):
        if len(self.scopes) == 1:
            raise RuntimeError("cannot leave the global scope")
        return self.scopes.pop()
