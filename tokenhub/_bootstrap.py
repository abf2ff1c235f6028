from __future__ import annotations

import sys
from pathlib import Path

# Checkout root, one level above the tokenhub package.
ROOT = Path(__file__).resolve().parents[1]

# `streamlit run tokenhub/app.py` only puts tokenhub/ itself on sys.path.
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)
