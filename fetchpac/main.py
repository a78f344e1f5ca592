"""
Main entry point for fetchpac.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import sys
from typing import Optional, Sequence

from .cli.main import FetchpacCLI
from .exceptions import FetchpacError
from .ui.colors import RESET


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI application."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        return FetchpacCLI().run(argv)

    except FetchpacError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        # Leave the terminal without dangling colors
        sys.stdout.write(RESET + "\n")
        return 130
    except OSError as e:
        # Writing to the terminal failed
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
