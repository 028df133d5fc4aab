#!/usr/bin/env python3
"""tv-show-emoji entry point.

Usage:
    python -m tv_show_emoji "The Office" -s mood
    python -m tv_show_emoji --list-subjects
"""

from __future__ import annotations

import sys

from tv_show_emoji import cli


def main() -> int:
    """Run the CLI with ``sys.argv``."""
    return cli.main()


if __name__ == "__main__":
    sys.exit(main())
