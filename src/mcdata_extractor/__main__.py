#!/usr/bin/env python3
"""
Minecraft Data Extractor main entry point

Allows running the exporter with ``python -m mcdata_extractor``.
"""

import sys

from mcdata_extractor.main import main


if __name__ == "__main__":
    sys.exit(main())
