#!/usr/bin/env python3
"""
螢幕對齊工具

主程式進入點

使用方法:
    uv run main.py --dry-run
"""

import sys

from display_aligner.cli import main


if __name__ == "__main__":
    sys.exit(main())
