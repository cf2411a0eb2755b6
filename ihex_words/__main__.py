"""Package entry point for ``python -m ihex_words``.

WHY: Lets the converter run without the console script installed, e.g.
``python -m ihex_words --big-endian < rom.hex > rom32.hex``.

HOW: Delegates straight to the CLI's main().
"""

from ihex_words.cli import main

if __name__ == "__main__":
    main()
