import sys
from config import EXIT_SUCCESS, EXIT_INTERRUPTED
from Core.shell import main_loop


def main():
    try:
        main_loop()
    except KeyboardInterrupt:
        # Ctrl+C is not trapped: leave quietly, no traceback
        print()
        return EXIT_INTERRUPTED
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
