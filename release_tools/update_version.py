# release_tools/update_version.py
import sys
from typing import List, Optional

from release_tools.core.config import get_release_settings
from release_tools.utils.exceptions import ReleaseScriptError
from release_tools.utils.logger import logger
from release_tools.version import update_module_version


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Лишние аргументы игнорируются
    new_version = argv[0] if argv else ""
    module_path = get_release_settings().RELEASE_MODULE_PATH

    try:
        previous = update_module_version(new_version, module_path)
    except ReleaseScriptError as exp:
        logger.error(f"❌ {exp.detail}")
        return 1
    except OSError as exp:
        logger.error(f"❌ Cannot update {module_path}: {exp}")
        return 1

    logger.info(f"✅ Version updated: {previous} -> {new_version} ({module_path})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
