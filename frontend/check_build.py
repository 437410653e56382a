#!/usr/bin/env python3
"""Verify that the frontend build contains the pages the deploy expects."""

import os
import sys
sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "src"))

from presence import REQUIRED_FILES, MissingRequiredFilesError, require

FRONTEND_DIR = os.path.dirname(os.path.abspath(__file__))


def main():
    try:
        require(FRONTEND_DIR, REQUIRED_FILES)
    except MissingRequiredFilesError as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)

    for fname in REQUIRED_FILES:
        print(f"  ok {fname}")
    print("All required files exist!")


if __name__ == "__main__":
    main()
