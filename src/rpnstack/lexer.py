from functools import reduce
import operator

import regex

from .util import RPNError
from .operations import Op


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    A lexeme is a whole input line: either a number or exactly one command.
    No whitespace is stripped, and commands are case-sensitive.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Plain ASCII digits only; regex's \d would also take other scripts'.
    DIGITS = r'[0-9]+'
    # Mantissa of a number
    MANTISSA = r'''
                # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                (?:
                    # 1, 12, 1. (notice trailing dot), 1.3
                    {DIGITS}
                    (?:
                        \.
                        (?:{DIGITS})?
                    )?
                )|(?:
                    # .2
                    \.
                    {DIGITS}
                )
                '''.format(DIGITS=DIGITS)
    # 1e3, 1E+3, 1e-3
    EXPONENT = r'''
                (?:
                    [eE]
                    [+\-]?
                    {DIGITS}
                )
                '''.format(DIGITS=DIGITS)
    # Spelt-out floats, any case: inf, Infinity, NaN, ...
    SPECIAL = r'''
               (?i:
                   inf(?:inity)?
                   |
                   nan
               )
               '''
    # Number, of any kind supported by grammar.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              [+\-]?
              (?:
                  (?:
                      (?:{MANTISSA})
                      {EXPONENT}?
                  )
                  |
                  {SPECIAL}
              )
              '''.format(MANTISSA=MANTISSA, EXPONENT=EXPONENT, SPECIAL=SPECIAL)

    # Longest first, so that alternation never settles for a prefix. The
    # empty command (duplicate) naturally sorts last.
    COMMAND = r'(?:' + r'|'.join(map(regex.escape,
                                     sorted((op.value for op in Op),
                                            key=len,
                                            reverse=True))) + r')'

    # All possible lexemes. Numbers take precedence, so 'inf' and 'nan' are
    # numbers and never commands.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<command>' + COMMAND + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self):
        self.pattern = regex.compile(type(self).LEXEME, flags=type(self).FLAGS)

    def lex(self, line):
        '''
        Match the whole line as a single lexeme.

        Raise RPNError if it is neither a number nor a command.
        '''
        match = self.pattern.fullmatch(line)
        if match is None:
            raise RPNError("Couldn't lex {0}".format(repr(line)))
        return match

    def matchedgroups(self, match):
        '''
        Return lexeme matches, by kind.

        The empty command is a match too, hence the comparison to None.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value is not None}

    def classify(self, line):
        '''
        Return the lexeme kinds line matches, or an empty dict if none.
        '''
        try:
            return self.matchedgroups(self.lex(line))
        except RPNError:
            return {}
