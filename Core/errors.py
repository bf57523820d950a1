import sys
from config import SHELL_NAME, EXIT_FAILURE


class ShellError(Exception):
    """Recoverable error: reported, then the loop goes on"""


class MissingArgument(ShellError):
    pass


class DirectoryChangeError(ShellError):
    pass


def report(message):
    """In một dòng chẩn đoán ra stderr, có tiền tố tên shell"""
    print(f"{SHELL_NAME}: {message}", file=sys.stderr)


def fatal(message):
    """Report and terminate the interpreter immediately"""
    report(message)
    sys.exit(EXIT_FAILURE)
