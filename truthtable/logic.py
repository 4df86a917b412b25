import itertools

import pandas as pd

from .expression import get_variables
from .scope import Assignment

RESULT_COLUMN = "Result"


def boolean_permutation(length):
    """
    All 2 ** length assignments. Row i gives variable j the value of bit j of i,
    so the first variable changes fastest
    """
    for values in itertools.product([False, True], repeat=length):
        yield values[::-1]


def generate_truth_table(ast, variables=None, strict=False):
    """
    Returns pandas dataframe, one column per variable and a final Result column
    """
    if variables is None:
        variables = get_variables(ast)

    headers = [*variables, RESULT_COLUMN]
    rows = []

    for perm in boolean_permutation(len(variables)):
        scope = Assignment(
            {var: val for var, val in zip(variables, perm)}, strict=strict
        )
        rows.append([*perm, ast.evaluate(scope)])

    # A variable may itself be called Result, columns are only used by position
    return pd.DataFrame(rows, columns=headers, dtype=bool)


def format_truth_table(table, binary_result=False):
    variables = list(table.columns[:-1])

    # With no variables this still starts with the separator
    header = " | ".join(v.upper() for v in variables) + " | " + RESULT_COLUMN
    lines = [header, "-" * len(header)]

    for row in table.itertuples(index=False, name=None):
        *values, result = row
        if binary_result:
            result = "1" if result else "0"
        else:
            result = str(bool(result)).lower()
        inputs = " | ".join("1" if v else "0" for v in values)
        lines.append(inputs + " | " + result)

    return lines


def print_truth_table(ast, variables=None, binary_result=False, frame=False):
    table = generate_truth_table(ast, variables)

    print("Truth Table:")
    if frame:
        print(table.to_string(index=False))
        return

    for line in format_truth_table(table, binary_result=binary_result):
        print(line)
