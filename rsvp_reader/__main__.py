"""Package entry point for ``python -m rsvp_reader``.

WHY: Users run the reader as ``python -m rsvp_reader book.txt`` when the
``rsvp`` console script is not on PATH. Python's ``-m`` flag looks for
``__main__.py`` inside the package and executes it.

HOW: Delegates to the CLI's main() and exits with its return code.
"""

import sys

if __name__ == "__main__":
    from rsvp_reader.cli import main
    sys.exit(main())
