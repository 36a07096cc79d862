"""
Main entry point for the patternfly_cli package.

Running ``python -m patternfly_cli`` behaves like the ``patternfly-cli``
console script.
"""

from patternfly_cli.cli import main

if __name__ == "__main__":
    main()
