"""Host primitives - idempotent file, env-file and keystore operations.

Every mutating call returns True when it changed something on the host, so callers
can decide whether the managed service needs a restart.
"""

from .EnvFile import EnvFile
from .FileManager import FileManager
from .Keystore import Keystore

__all__ = ["EnvFile", "FileManager", "Keystore"]
