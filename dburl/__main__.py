"""Allow ``python -m dburl``."""
from __future__ import annotations

from dburl.common.container import main

if __name__ == '__main__':
  main()
