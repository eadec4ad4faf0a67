"""
Host argument source for switchargs

The builder reads raw tokens through a zero-argument callable so tests can
substitute an explicit token sequence.
"""

import sys
from typing import List


def host_arguments() -> List[str]:
    """Arguments the host process was invoked with, minus the program name"""
    return list(sys.argv[1:])
