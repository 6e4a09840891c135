# scripts/update_version.py
#
# Usage (from the distribution root): python scripts/update_version.py <next-version>

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from release_tools.update_version import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
