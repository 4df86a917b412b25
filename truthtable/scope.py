class FrozenDict(dict):
    def _immutable(self, *args, **kws):
        raise TypeError("cannot change object - object is immutable")

    __setitem__ = _immutable
    __delitem__ = _immutable
    pop = _immutable
    popitem = _immutable
    clear = _immutable
    update = _immutable
    setdefault = _immutable


class UnboundVariable(KeyError):
    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"variable '{self.name}' has no value"


class Assignment:
    """
    Values of the variables for one row of a truth table.

    Looking up a variable that was not assigned gives False, which hides typos in
    variable names. With strict=True the lookup raises UnboundVariable instead.
    """

    def __init__(self, identifiers=None, strict=False):
        self._identifiers = FrozenDict(
            {name: bool(value) for name, value in (identifiers or {}).items()}
        )
        self.strict = strict

    @property
    def identifiers(self):
        return self._identifiers

    def has_identifier(self, name):
        return name in self._identifiers

    def get_identifier(self, name):
        if name in self._identifiers:
            return self._identifiers[name]
        if self.strict:
            raise UnboundVariable(name)
        return False

    def __repr__(self):
        return f"Assignment({dict(self._identifiers)!r})"
