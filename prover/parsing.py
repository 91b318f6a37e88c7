"""
Reading clauses from text.

One clause per line, literals separated by whitespace, a leading tilde
for negation:

    rain ~umbrella wet
    ~wet
    end

Reading stops at a line that is exactly "end". Blank lines and lines
starting with "#" are skipped. A line "[]" is the empty clause.
"""

from typing import Iterable

from .core.state import Clause, InvalidLiteral, Literal

END_OF_INPUT = "end"
EMPTY_CLAUSE = "[]"


def parse_literal(token: str) -> Literal:
    """'A' -> A, '~A' -> ~A. Raises InvalidLiteral for anything else."""
    if token.startswith("~"):
        atom, negated = token[1:], True
    else:
        atom, negated = token, False
    if not atom:
        raise InvalidLiteral(f"literal token {token!r} has no atom")
    return Literal(atom, negated)


def parse_clause(line: str, label: str = "") -> Clause:
    """Parse one line of tokens into a clause. Repeated literals collapse."""
    text = line.strip()
    if text == EMPTY_CLAUSE:
        return Clause(frozenset(), label=label)
    return Clause(frozenset(parse_literal(tok) for tok in text.split()), label=label)


def read_clauses(lines: Iterable[str]) -> list:
    """Parse lines until the end marker. Labels record the source line number."""
    clauses = []
    for lineno, line in enumerate(lines, start=1):
        text = line.strip()
        if text == END_OF_INPUT:
            break
        if not text or text.startswith("#"):
            continue
        try:
            clauses.append(parse_clause(text, label=f"line {lineno}"))
        except InvalidLiteral as e:
            raise InvalidLiteral(f"line {lineno}: {e}") from e
    return clauses
