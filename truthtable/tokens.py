from enum import Enum
import re

from . import expression

###########
# Library #
###########

# Tokens are whitespace separated words. Every word is classified by the first
# token class whose pattern matches it entirely, identifiers are tried last


def re_match(string, r, l=None):
    l = l or (lambda x: x.group(0))
    # ASCII only, so that look-alikes such as "falſe" are not keywords
    m = re.fullmatch(r, string, re.IGNORECASE | re.ASCII)
    if m:
        return l(m)
    return None


class IToken:
    m_re = None

    re_l = None

    def __init__(self, value, start, end):
        self.value = value
        self.start = start
        self.end = end

    @classmethod
    def match(cls, string):
        """
        Returns the token value if the whole string is this token, otherwise None
        """
        if cls.m_re:
            return re_match(string, cls.m_re, cls.re_l)
        raise NotImplementedError()

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.value == other.value
            and self.start == other.start
        )

    def __hash__(self):
        return hash((type(self), self.value, self.start))

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.value.__repr__()}>"


class ISingleExpression(IToken):
    pass


class ConstantToken(ISingleExpression):
    pass


class IdentifierToken(ISingleExpression):
    pass


class OperatorToken(IToken):
    # Expression class built from this operator
    node = None


class UnaryOperatorToken(OperatorToken):
    pass


class BinaryOperatorToken(OperatorToken):
    pass


class LogicalOperatorToken(BinaryOperatorToken):
    pass


class ComparisonOperatorToken(BinaryOperatorToken):
    pass


class OpenParenthesisToken(IToken):
    pass


class CloseParenthesisToken(IToken):
    pass


# Built in tokens

KEYWORDS = ("not", "true", "false", "and", "or", "xor", "imply", "eq", "neq")


class Boolean(ConstantToken):
    re_l = lambda x: x.group(0).lower() == "true"
    m_re = r"true|false"


class Variable(IdentifierToken):
    # Case is significant for variables, unlike keywords
    re_l = lambda x: None if x.group(0).lower() in KEYWORDS else x.group(0)
    m_re = r"[a-zA-Z]+"

    @classmethod
    def match(cls, string):
        m = re.fullmatch(cls.m_re, string)
        if m:
            return cls.re_l(m)
        return None


class Unknown(IToken):
    """
    Anything the vocabulary does not know. Never matched directly, the parser rejects it
    """

    @classmethod
    def match(cls, string):
        return None


class OpenParenthesis(OpenParenthesisToken):
    m_re = r"\("


class CloseParenthesis(CloseParenthesisToken):
    m_re = r"\)"


class Negation(UnaryOperatorToken):
    m_re = r"not"
    node = expression.Not


class And(LogicalOperatorToken):
    m_re = r"and|∧"
    node = expression.And


class Or(LogicalOperatorToken):
    m_re = r"or|∨"
    node = expression.Or


class Xor(LogicalOperatorToken):
    m_re = r"xor|⊕"
    node = expression.Xor


class Imply(LogicalOperatorToken):
    m_re = r"imply|→"
    node = expression.Imply


class Equal(ComparisonOperatorToken):
    m_re = r"=|eq"
    node = expression.Equal


class NotEqual(ComparisonOperatorToken):
    m_re = r"≠|neq"
    node = expression.NotEqual


class ITokenCollection(Enum):
    @classmethod
    def list(cls):
        return list(map(lambda c: c.value, cls))


class BaseTokens(ITokenCollection):
    OPEN_PARENTHESIS = OpenParenthesis
    CLOSE_PARENTHESIS = CloseParenthesis
    BOOLEAN = Boolean
    VARIABLE = Variable


class LogicalTokens(ITokenCollection):
    NEGATION = Negation
    AND = And
    OR = Or
    XOR = Xor
    IMPLY = Imply


class ComparisonTokens(ITokenCollection):
    EQUAL = Equal
    NOT_EQUAL = NotEqual


class Tokenlib:
    base = BaseTokens
    logical = LogicalTokens
    comparison = ComparisonTokens

    @staticmethod
    def load(*args):
        """
        Ordered and without duplicates. Identifiers go last so keywords win
        """
        tokens = list(dict.fromkeys(t for arg in args for t in arg.list()))
        return sorted(tokens, key=lambda t: issubclass(t, IdentifierToken))


DEFAULT_TOKENS = Tokenlib.load(Tokenlib.base, Tokenlib.logical, Tokenlib.comparison)


def classify(value, start, end, tokens=None):
    for token in tokens or DEFAULT_TOKENS:
        if (v := token.match(value)) is not None:
            return token(v, start, end)
    return Unknown(value, start, end)


def tokenize(string, tokens=None):
    """
    Splits on runs of whitespace. Never fails, unknown words become Unknown tokens
    """
    return [
        classify(m.group(0), m.start(), m.end(), tokens)
        for m in re.finditer(r"\S+", string)
    ]
