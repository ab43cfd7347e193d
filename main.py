#!/usr/bin/env python3
"""
Render Engine - renders HTML and CSS to an image.

Convenience launcher for running from a source checkout.
"""

import sys

from render_engine.main import main

if __name__ == "__main__":
    sys.exit(main())
