import os
import sys
from Core.errors import report
from Core.status import Status


def wait_for(pid):
    """
    Block until the child exits or is killed by a signal.
    A stopped child is not finished: keep waiting.
    """
    while True:
        _, status = os.waitpid(pid, os.WUNTRACED)
        if os.WIFEXITED(status) or os.WIFSIGNALED(status):
            return status


def run_child(args):
    """
    Replace the child's image with args[0], searched on PATH.
    Never returns: on failure the child reports and exits.
    """
    try:
        os.execvp(args[0], args)
    except OSError as e:
        report(f"{args[0]}: {e.strerror}")
    except ValueError as e:
        report(f"{args[0]}: {e}")
    finally:
        sys.stderr.flush()
        os._exit(1)


def launch(args):
    """
    Chạy lệnh ngoài trong tiến trình con và chờ nó kết thúc.
    Returns: Status.CONTINUE, whatever happened to the child
    """
    # Nothing buffered may be inherited by the child
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        pid = os.fork()
    except OSError as e:
        report(f"fork failed: {e.strerror}")
        return Status.CONTINUE

    if pid == 0:
        run_child(args)

    # Exit status is not used by the shell
    wait_for(pid)
    return Status.CONTINUE
