from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Keep the rotating log file out of the working tree
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="probe-logs-"))
