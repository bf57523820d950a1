SHELL_NAME = "tinysh"
PROMPT = "> "

# Token delimiters, each character is a separator on its own
TOK_DELIM = " \t\n\r\a"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
# 128 + SIGINT, as shells report an interrupted run
EXIT_INTERRUPTED = 130

HELP_BANNER = [
    "tinysh",
    "Type program names and arguments, and hit enter.",
    "The following are built in:",
]
HELP_FOOTER = "Use the man command for information on other programs."
