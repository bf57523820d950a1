import shlex
from config import TOK_DELIM
from Core.errors import fatal


def split_line(line):
    """
    Split a command line into tokens on runs of TOK_DELIM characters.
    No quoting, escaping or comments: every other character is literal.
    Returns: list of tokens, args[0] is the command name
    """
    lex = shlex.shlex(line, posix=False)
    lex.whitespace = TOK_DELIM
    lex.whitespace_split = True
    lex.commenters = ""
    lex.quotes = ""
    lex.escape = ""

    try:
        return list(lex)
    except MemoryError:
        fatal("allocation error")
