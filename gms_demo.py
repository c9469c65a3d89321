"""
GMS demo - show ORB matches between dog01.jpg and dog02.jpg filtered by GMS
with no rotation/scale support, rotation and scale support, and scale support only.

Press any key on a focused window to move to the next configuration.
Command line arguments are ignored.
"""

import sys
from pathlib import Path

# Add parent directory to path if needed
sys.path.insert(0, str(Path(__file__).parent))

from gmsdemo.config import CONFIG_FILENAME, ConfigError, load_config
from gmsdemo.core import GmsDemo
from gmsdemo.utils.logger import setup_logger


def main() -> int:
    """Run the demo from the current working directory."""
    try:
        config = load_config(CONFIG_FILENAME)
    except ConfigError as e:
        print(f"[X] Error: {e}", file=sys.stderr)
        return 1

    setup_logger('gmsdemo', config['logging']['level'], config['logging']['log_file'])
    return GmsDemo(config=config).run()


if __name__ == "__main__":
    sys.exit(main())
