"""
Entry point for ``python -m emojiscript.cli``.
"""

from . import main

if __name__ == '__main__':
    main()
