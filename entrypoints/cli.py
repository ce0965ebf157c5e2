"""CLI entrypoint for dburl."""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dburl.common.container import main


if __name__ == '__main__':
  main()
