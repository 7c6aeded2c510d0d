#!/usr/bin/env python3
"""Entry point script for the web clipping tool."""

from webclip.main import main

if __name__ == "__main__":
    main()
