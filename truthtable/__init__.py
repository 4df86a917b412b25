from .expression import (
    And,
    Constant,
    Equal,
    Imply,
    Not,
    NotEqual,
    Or,
    Variable,
    Xor,
    evaluate,
    get_variables,
)
from .logic import (
    boolean_permutation,
    format_truth_table,
    generate_truth_table,
    print_truth_table,
)
from .parser import InvalidExpression, ParseError, Parser, parse
from .scope import Assignment, UnboundVariable
from .tokens import Tokenlib, tokenize
