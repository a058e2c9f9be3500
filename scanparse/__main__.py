import sys
from typing import List, Optional

from scanparse.driver import process
from scanparse.util import open_file

USAGE = "Usage: scanparse <filename>"


def main(argv: Optional[List[str]] = None) -> int:
    """Print the breadth-first parse tree of every line in the given file.

    Returns 0 on success or when only the usage is printed, 1 on the first syntax
    error and 2 if the file cannot be read.
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(USAGE)
        return 0

    filename = args[0]
    try:
        program = open_file(filename)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Failed to open file {filename!r}: {exc}", file=sys.stderr)
        return 2

    for result in process(program):
        if result.error is not None:
            sys.stdout.flush()
            print(result.error, file=sys.stderr)
            return 1
        sys.stdout.write(result.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
