"""
Record Identifiers - Opaque, globally unique ids that sort by creation order
"""

import itertools
import os
import threading
import time

# 5 random bytes per process, so ids from different workers never collide
_PROCESS_TOKEN = os.urandom(5).hex()
_counter = itertools.count()
_lock = threading.Lock()

ID_LENGTH = 24


def generate_id() -> str:
    """
    Return a 24-character hex id: 4-byte timestamp, 5-byte process token,
    3-byte counter.

    Ids created later in the same process always compare greater.
    """
    with _lock:
        count = next(_counter) % 0x1000000
        timestamp = int(time.time())
    return f"{timestamp:08x}{_PROCESS_TOKEN}{count:06x}"
