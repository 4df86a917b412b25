from .scope import Assignment

# Expression tree. Built bottom up by the parser and never modified afterwards,
# every node owns its children


def pad_newlines_or_blank(string: str, padwith: str = "  "):
    if string:
        return "\n" + "\n".join([padwith + v for v in string.split("\n")]) + "\n"
    return ""


class IExpression:
    arity = 0

    def __init__(self, *args):
        if len(args) != self.arity:
            raise TypeError(
                f"{self.__class__.__name__} takes {self.arity} operand(s), got {len(args)}"
            )
        for arg in args:
            if not isinstance(arg, IExpression):
                raise TypeError(f"{arg.__repr__()} is not an expression")
        self._args = tuple(args)

    @property
    def args(self):
        return self._args

    def evaluate(self, scope):
        raise NotImplementedError()

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))

    def __repr__(self):
        args = ",\n".join(map(repr, self.args))
        return f"{self.__class__.__name__}({pad_newlines_or_blank(args)})"


class Variable(IExpression):
    def __init__(self, name: str):
        super().__init__()
        self._name = name

    @property
    def name(self):
        return self._name

    def evaluate(self, scope):
        return scope.get_identifier(self.name)

    def __eq__(self, other):
        return type(self) is type(other) and self.name == other.name

    def __hash__(self):
        return hash((Variable, self.name))

    def __repr__(self):
        return f"Variable({self.name.__repr__()})"


class Constant(IExpression):
    def __init__(self, value: bool):
        super().__init__()
        self._value = bool(value)

    @property
    def value(self):
        return self._value

    def evaluate(self, scope):
        return self.value

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((Constant, self.value))

    def __repr__(self):
        return f"Constant({self.value})"


class Function(IExpression):
    """
    A node whose value is computed from the values of its operands.
    Every operand is evaluated, there is no short circuiting
    """

    def exec(self, args):
        raise NotImplementedError()

    def evaluate(self, scope):
        return self.exec([v.evaluate(scope) for v in self.args])


class Not(Function):
    arity = 1

    @property
    def operand(self):
        return self.args[0]

    def exec(self, args):
        return not args[0]


class BinaryExpression(Function):
    arity = 2

    @property
    def left(self):
        return self.args[0]

    @property
    def right(self):
        return self.args[1]


class And(BinaryExpression):
    def exec(self, args):
        return args[0] and args[1]


class Or(BinaryExpression):
    def exec(self, args):
        return args[0] or args[1]


class Xor(BinaryExpression):
    def exec(self, args):
        return args[0] != args[1]


class Imply(BinaryExpression):
    def exec(self, args):
        return not args[0] or args[1]


class Equal(BinaryExpression):
    def exec(self, args):
        return args[0] == args[1]


# Same truth function as Xor
class NotEqual(BinaryExpression):
    def exec(self, args):
        return args[0] != args[1]


def evaluate(ast, assignment=None):
    """
    Evaluates the tree. assignment is an Assignment or a plain dict of name -> bool
    """
    if not isinstance(assignment, Assignment):
        assignment = Assignment(assignment)
    return ast.evaluate(assignment)


def ast_visitor(ast, l):
    l(ast)
    for arg in ast.args:
        ast_visitor(arg, l)


def get_variables(ast):
    """
    Sorted, case sensitive and without duplicates
    """
    variables = set()
    ast_visitor(
        ast,
        lambda x: variables.add(x.name) if isinstance(x, Variable) else None,
    )
    return sorted(variables)
