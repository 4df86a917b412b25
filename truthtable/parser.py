import logging

from . import expression
from .tokens import (
    DEFAULT_TOKENS,
    CloseParenthesisToken,
    ComparisonOperatorToken,
    ConstantToken,
    IdentifierToken,
    IToken,
    LogicalOperatorToken,
    OpenParenthesisToken,
    UnaryOperatorToken,
    classify,
    tokenize,
)

logger = logging.getLogger(__name__)

# Recursive descent parser, lowest precedence first
#
#   Expression := Term ( LogicalOp Term )*
#   Term       := Factor ( ComparisonOp Factor )*
#   Factor     := "not" Factor | "true" | "false" | Variable | "(" Expression ")"
#
# So comparisons bind looser than and/or/xor/imply. Both loops are left associative


class ParseError(Exception):
    def __init__(self, err, start, end):
        super().__init__(err, start, end)
        self.err = err
        self.start = start
        self.end = end

    def __str__(self):
        return f"@[{self.start}, {self.end}]: {self.err}"


class InvalidExpression(ParseError):
    @property
    def reason(self):
        return self.err


class Parser:
    def __init__(self, tokens=None, allow_trailing=True):
        tokens = tokens or DEFAULT_TOKENS
        for token in tokens:
            if not issubclass(token, IToken):
                raise Exception(token, "is not a token")
        self.tokens = tokens
        self.allow_trailing = allow_trailing

        self._stream = []
        self._index = 0

    def tokenize(self, string):
        return tokenize(string, self.tokens)

    def parse(self, string):
        return self.parse_tokens(self.tokenize(string))

    def parse_tokens(self, tokens):
        """
        Parses a sequence of tokens. Raw strings are classified first.
        Raises InvalidExpression, a partial tree is never returned
        """
        self._stream = self._classify(tokens)
        self._index = 0

        try:
            ast = self.parse_expression()
        except RecursionError:
            token = self.current() or self._stream[-1]
            raise InvalidExpression(
                "expression nested too deeply", token.start, token.end
            ) from None

        if (token := self.current()) is not None:
            if not self.allow_trailing:
                raise InvalidExpression(
                    f"unexpected trailing token: {token.value}", token.start, token.end
                )
            logger.debug("ignoring trailing tokens from %r", token)

        return ast

    def _classify(self, tokens):
        stream = []
        position = 0
        for token in tokens:
            if not isinstance(token, IToken):
                token = classify(token, position, position + len(token), self.tokens)
            stream.append(token)
            position = token.end + 1
        return stream

    def current(self):
        if self._index < len(self._stream):
            return self._stream[self._index]
        return None

    def advance(self):
        token = self.current()
        self._index += 1
        return token

    def end_of_input(self):
        end = self._stream[-1].end if self._stream else 0
        return InvalidExpression("unexpected end of input", end, end)

    def parse_expression(self):
        logger.debug("expression at %d", self._index)
        left = self.parse_term()

        while isinstance(token := self.current(), LogicalOperatorToken):
            logger.debug("logical operator %r", token)
            self.advance()
            left = token.node(left, self.parse_term())

        return left

    def parse_term(self):
        logger.debug("term at %d", self._index)
        left = self.parse_factor()

        while isinstance(token := self.current(), ComparisonOperatorToken):
            logger.debug("comparison operator %r", token)
            self.advance()
            left = token.node(left, self.parse_factor())

        return left

    def parse_factor(self):
        logger.debug("factor at %d", self._index)
        token = self.advance()

        if token is None:
            raise self.end_of_input()

        if isinstance(token, UnaryOperatorToken):
            return token.node(self.parse_factor())
        if isinstance(token, ConstantToken):
            return expression.Constant(token.value)
        if isinstance(token, IdentifierToken):
            return expression.Variable(token.value)
        if isinstance(token, OpenParenthesisToken):
            node = self.parse_expression()
            if not isinstance(self.current(), CloseParenthesisToken):
                closing = self.current() or token
                raise InvalidExpression(
                    "expected closing parenthesis", token.start, closing.end
                )
            self.advance()
            return node

        raise InvalidExpression(
            f"unexpected token: {token.value}", token.start, token.end
        )


def parse(tokens, allow_trailing=True):
    return Parser(allow_trailing=allow_trailing).parse_tokens(tokens)
