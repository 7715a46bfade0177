from ast_dump import ast_to_dict, pretty


class VitusError(Exception):
    pass


class ScanError(VitusError):
    def __init__(self, message: str, line: int, column: int):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"Scan error at {self.line}:{self.column}. {self.message}"


class ParseError(VitusError):
    def __init__(self, message: str, token):
        super().__init__(message)
        self.message = message
        self.token = token

    @property
    def line(self) -> int:
        return self.token.line

    @property
    def column(self) -> int:
        return self.token.column

    def __str__(self) -> str:
        return f"Parse error at {self.line}:{self.column}. {self.message}"


class ParseErrors(VitusError):
    """Every syntax error collected during one parse, in source order."""

    def __init__(self, errors: list[ParseError]):
        super().__init__(f"{len(errors)} syntax error(s)")
        self.errors = list(errors)

    def __str__(self) -> str:
        return "\n".join(str(e) for e in self.errors)


class ScopeError(VitusError):
    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.message = message
        self.name = name


class InterpreterError(VitusError):
    def __init__(self, message: str, node, show_node: bool = True):
        super().__init__(message)
        self.message = message
        self.node = node
        self.show_node = show_node

    @property
    def line(self) -> int | None:
        return getattr(self.node, "line", None)

    @property
    def column(self) -> int | None:
        return getattr(self.node, "column", None)

    def format(self, indent: str = "") -> str:
        if self.line is None:
            lines = [f"{indent}Runtime error. {self.message}"]
        else:
            lines = [f"{indent}Runtime error at {self.line}:{self.column}. {self.message}"]
        if self.node is not None and self.show_node:
            lines.append(f"{indent}  in:")
            lines.append(pretty(ast_to_dict(self.node), indent=2 + len(indent) // 2))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()
