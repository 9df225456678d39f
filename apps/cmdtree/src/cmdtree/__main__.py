"""Entry point for running cmdtree as a module.

This allows running: python -m cmdtree
"""

from .cli import main

if __name__ == "__main__":
    # main() is the CLI boundary; run_repl() is the error boundary for the loop.
    main()
