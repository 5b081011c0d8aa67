"""Package entry point for ``python -m letter_signs``.

WHY: Users run the converter as ``python -m letter_signs "some text"``
without installing the console script.

HOW: Delegates to the CLI's main() function.
"""

from letter_signs.cli import main

if __name__ == "__main__":
    main()
