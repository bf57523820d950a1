import sys
from config import PROMPT
from Core.builtin import BUILTINS
from Core.errors import ShellError, report
from Core.executor import launch
from Core.parser import split_line
from Core.reader import read_line
from Core.status import Status


def prompt():
    """Generate shell prompt"""
    return PROMPT


def execute(args, builtins=BUILTINS):
    """
    Run one tokenized command: builtin if the name is registered,
    external program otherwise.
    Returns: Status
    """
    if not args:
        # An empty command was entered
        return Status.CONTINUE

    handler = builtins.get(args[0])
    if handler is None:
        return launch(args)

    try:
        return handler(args)
    except ShellError as e:
        report(e)
        return Status.CONTINUE


def main_loop(builtins=BUILTINS, stdin=None, stdout=None):
    """Main shell loop"""
    stdout = stdout if stdout is not None else sys.stdout
    status = Status.CONTINUE

    while status is Status.CONTINUE:
        stdout.write(prompt())
        stdout.flush()
        try:
            line = read_line(stdin)
        except EOFError:
            # End of input without `exit`
            stdout.write("\n")
            return Status.STOP

        args = split_line(line)
        status = execute(args, builtins)

    return status
