"""Parser for polynomials written in one variable.

The important functions are:
 - parse_polynomial: str -> Polynomial
 - tokenize: str -> token stream

Accepted syntax, by example:
    x^3 - 2x + 1        3*x**2 + 1/2        -(x + 1)^2 (x - 1)
"""

# builtin
from fractions import Fraction

# 3rd party
from ply import lex, yacc

# ours
from polydiv.polynomials import Polynomial
from polydiv.rings import QQ

class ParseError(Exception):
    pass

# Operator tokens are named OP_*; both "^" and "**" lex as OP_POW.
_OPERATORS = ["POW", "PLUS", "MINUS", "TIMES", "SLASH", "OPEN_PAREN", "CLOSE_PAREN"]

# Lexer ########################################################################

def op_token_name(opname):
    return "OP_{}".format(opname.upper())

tokens = [op_token_name(opname) for opname in _OPERATORS]
tokens += ["WORD", "NUM"]
tokens = tuple(tokens) # freeze tokens

def make_lexer():

    # ply discovers token rules among the local variables of this function
    t_OP_POW = r"\^|\*\*"
    t_OP_PLUS = r"\+"
    t_OP_MINUS = r"-"
    t_OP_TIMES = r"\*"
    t_OP_SLASH = r"/"
    t_OP_OPEN_PAREN = r"\("
    t_OP_CLOSE_PAREN = r"\)"

    def t_WORD(t):
        r"[a-zA-Z_]\w*"
        return t

    def t_NUM(t):
        r"\d+"
        t.value = int(t.value)
        return t

    t_ignore = " \t\n"

    def t_error(t):
        raise ParseError("Illegal character {!r} at position {}".format(t.value[0], t.lexpos))

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Parser #######################################################################
#
# The parser builds polynomials over QQ; `parse_polynomial` moves the result
# into the requested ring afterwards.

_X = Polynomial.X(QQ)

def make_parser():
    start = "poly"

    def p_poly(p):
        """poly : term
                | OP_MINUS term
                | OP_PLUS term
                | poly OP_PLUS term
                | poly OP_MINUS term"""
        if len(p) == 2:
            p[0] = p[1]
        elif p[1] == "-":
            p[0] = -p[2]
        elif p[1] == "+":
            p[0] = p[2]
        elif p[2] == "+":
            p[0] = p[1] + p[3]
        else:
            p[0] = p[1] - p[3]

    def p_term(p):
        """term : power
                | term OP_TIMES power
                | term power"""
        if len(p) == 2:
            p[0] = p[1]
        else:
            p[0] = p[1] * p[len(p) - 1]

    def p_power(p):
        """power : atom
                 | atom OP_POW NUM"""
        if len(p) == 2:
            p[0] = p[1]
        else:
            p[0] = p[1] ** p[3]

    def p_atom(p):
        """atom : NUM
                | NUM OP_SLASH NUM
                | WORD
                | OP_OPEN_PAREN poly OP_CLOSE_PAREN"""
        if len(p) == 4 and p[1] == "(":
            p[0] = p[2]
        elif len(p) == 4:
            if p[3] == 0:
                raise ParseError("Zero denominator in {}/{}".format(p[1], p[3]))
            p[0] = Polynomial.constant(Fraction(p[1], p[3]), QQ)
        elif isinstance(p[1], int):
            p[0] = Polynomial.constant(p[1], QQ)
        else:
            p[0] = _X

    def p_error(p):
        if p is None:
            raise ParseError("Unexpected end of input")
        raise ParseError("Syntax error at {!r} (position {})".format(p.value, p.lexpos))

    return yacc.yacc(debug=False, write_tables=False)

_parser = make_parser()

def parse_polynomial(s, ring=QQ, variable="x"):
    """Parse a string as a polynomial over `ring` in the given variable."""
    for tok in tokenize(s):
        if tok.type == "WORD" and tok.value != variable:
            raise ParseError("Unknown variable {!r} (expected {!r})".format(tok.value, variable))
    p = _parser.parse(s, lexer=_lexer.clone())
    if p is None:
        raise ParseError("Unexpected end of input")
    try:
        return p.change_ring(ring)
    except ValueError as e:
        raise ParseError("{} in {!r}".format(e, s)) from e
