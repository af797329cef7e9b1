"""
Writing finished command output to a file or standard output.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from .logging_config import get_logger

logger = get_logger(__name__)


def write_output(text: str, path: Optional[Union[str, Path]] = None) -> bool:
    """Write a text blob to ``path`` (or stdout when None) and flush it.

    Write failures are reported as warnings instead of being raised.

    Args:
        text: Complete output to write
        path: Destination file, truncated if it exists

    Returns:
        True if the text was written and flushed, False otherwise
    """
    try:
        if path is None:
            sys.stdout.write(text)
            sys.stdout.flush()
        else:
            with open(path, 'w', encoding='utf-8') as f:
                f.write(text)
                f.flush()
            logger.info(f'Wrote {len(text)} characters to {path}')
        return True

    except (OSError, UnicodeError) as e:
        logger.warning(f'Failed to write output to {path or "stdout"}: {e}')
        return False
