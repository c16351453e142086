#!/usr/bin/env python3
"""upload3r - エントリーポイント"""
from upload3r.cli import main


if __name__ == "__main__":
    main()
