"""Pytest configuration shared by the test suite."""

import sys
from pathlib import Path

# ``tests`` and ``stats`` are plain directories at the project root and
# ``search_trees`` lives under ``src/``; make all three importable when
# running ``pytest`` without an editable install.
_project_root = Path(__file__).resolve().parent
for _path in (str(_project_root), str(_project_root / "src")):
    if _path not in sys.path:
        sys.path.insert(0, _path)
