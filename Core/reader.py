import sys
from Core.errors import fatal


def read_line(stream=None):
    """
    Read one line from stdin, one character at a time.
    Returns: the line without its trailing newline.
    Raises EOFError if the stream ends before any character is read.
    """
    stream = stream if stream is not None else sys.stdin
    buffer = []

    try:
        while True:
            c = stream.read(1)
            if not c:
                if not buffer:
                    raise EOFError
                break
            if c == "\n":
                break
            buffer.append(c)
        return "".join(buffer)
    except MemoryError:
        # Never go on with a truncated line
        fatal("allocation error")
