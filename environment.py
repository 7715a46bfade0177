from errors import ScopeError


class Environment:
    """One lexical scope: its own bindings plus a link to the enclosing scope.

    A root environment lives for a whole program (or REPL session). Blocks, if
    branches and loop iterations each get a fresh child that is dropped when the
    construct finishes, so the chain is only as deep as the static nesting.
    """

    def __init__(self, parent=None):
        self.values = {}
        self.parent = parent

    def child(self):
        return Environment(self)

    @property
    def depth(self) -> int:
        depth = 0
        env = self.parent
        while env is not None:
            depth += 1
            env = env.parent
        return depth

    def __contains__(self, name):
        # this scope only
        return name in self.values

    def define(self, name, value):
        if name in self:
            raise ScopeError(f"Variable '{name}' is already declared in this scope.", name)
        self.values[name] = value

    def resolve(self, name):
        """Return the environment in the chain that declares name, or None."""
        env = self
        while env is not None:
            if name in env.values:
                return env
            env = env.parent
        return None

    def get(self, name):
        env = self.resolve(name)
        if env is None:
            raise ScopeError(f"Variable '{name}' not found.", name)
        return env.values[name]

    def assign(self, name, value):
        env = self.resolve(name)
        if env is None:
            raise ScopeError(f"Cannot assign to undeclared variable '{name}'.", name)
        env.values[name] = value
