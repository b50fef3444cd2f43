from typing import Optional, Sequence

# ======================================
# Error Kinds
# ======================================

class RisprError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message

class ParseFailure(RisprError):
    """The line does not match the grammar.

    `column` is 1-based and `None` when no position applies (empty input).
    `expected` holds readable token categories such as ``number`` or ``')'``.
    """

    def __init__(self, message: str, line: str = "", column: Optional[int] = None,
                 expected: Sequence[str] = ()):
        super().__init__(message)
        self.line = line
        self.column = column
        self.expected = tuple(expected)

    def __str__(self):
        if self.column is None:
            return self.message
        head = f"{self.message} at column {self.column}"
        if self.expected:
            head += f", expected {' or '.join(self.expected)}"
        caret = " " * (self.column - 1) + "^"
        return f"{head}\n  {self.line}\n  {caret}"

class NumeralRangeError(ParseFailure):
    """A numeral the grammar accepted does not fit in a signed 64-bit integer."""

    def __init__(self, numeral: str, line: str = "", column: Optional[int] = None):
        super().__init__(f"numeral {numeral} does not fit in a 64-bit signed integer", line, column)
        self.numeral = numeral

class EvaluationFailure(RisprError): pass
class DivisionByZero(EvaluationFailure): pass
class IntegerOverflow(EvaluationFailure): pass
class UnknownOperator(EvaluationFailure): pass
class ArityError(EvaluationFailure): pass
class MalformedExpression(EvaluationFailure): pass
