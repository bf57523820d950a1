import os
from types import MappingProxyType
from config import HELP_BANNER, HELP_FOOTER
from Core.errors import MissingArgument, DirectoryChangeError
from Core.status import Status


def builtin_cd(args):
    """Change directory to args[1]"""
    if len(args) < 2:
        raise MissingArgument('expected argument to "cd"')
    try:
        os.chdir(args[1])
    except (OSError, ValueError) as e:
        # ValueError: path with an embedded NUL
        reason = getattr(e, "strerror", None) or e
        raise DirectoryChangeError(f"cd: {args[1]}: {reason}") from e
    return Status.CONTINUE


def builtin_help(args):
    """Print help message"""
    for line in HELP_BANNER:
        print(line)
    for name in BUILTINS:
        print(f"    {name}")
    print(HELP_FOOTER)
    return Status.CONTINUE


def builtin_exit(args):
    return Status.STOP


# Built once at import, read-only afterwards. Order is the order `help` lists.
BUILTINS = MappingProxyType({
    'cd': builtin_cd,
    'help': builtin_help,
    'exit': builtin_exit,
})
