from __future__ import annotations

import sys
from pathlib import Path

# Allow running from repo root without installation.
SRC = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC))
