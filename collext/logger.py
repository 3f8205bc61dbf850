import logging
import os
import sys


def resolve_level(name: str, default: str = "WARNING") -> str:
    name = name.upper()
    # getLevelName maps known names to ints and anything else to "Level <name>"
    if isinstance(logging.getLevelName(name), int):
        return name

    return default


level = resolve_level(os.environ.get("COLLEXT_LOG_LEVEL", "WARNING"))

logger = logging.getLogger("collext")
logger.setLevel(level)

handler = logging.StreamHandler(sys.stdout)
handler.setLevel(level)
formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
handler.setFormatter(formatter)
logger.addHandler(handler)
