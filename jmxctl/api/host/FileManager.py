"""File primitive - ensure files and directories exist with given content, mode and owner."""

import os
import stat
from pathlib import Path

from ...utils.logger import get_logger
from .atomic_write import atomic_write
from .resolve_owner import resolve_owner

logger = get_logger("host.files")


class FileManager:
    """Idempotent create/update/remove of files and directories."""

    def ensure_attributes(self, path: Path, owner: str, mode: int) -> bool:
        """Set mode and owner of an existing path if they differ.

        Returns:
            True if anything was changed
        """
        uid, gid = resolve_owner(owner)
        st = os.stat(path)
        changed = False
        if stat.S_IMODE(st.st_mode) != mode:
            os.chmod(path, mode)
            logger.info("chmod %o %s", mode, path)
            changed = True
        if (st.st_uid, st.st_gid) != (uid, gid):
            os.chown(path, uid, gid)
            logger.info("chown %s %s", owner, path)
            changed = True
        return changed

    def ensure_directory(self, path: Path, owner: str, mode: int = 0o700) -> bool:
        """Create ``path`` (and parents) if missing, then fix mode and owner."""
        changed = False
        if not path.is_dir():
            path.mkdir(parents=True, mode=mode)
            logger.info("Created directory %s", path)
            changed = True
        return self.ensure_attributes(path, owner, mode) or changed

    def ensure_file(self, path: Path, content: str, owner: str, mode: int = 0o600) -> bool:
        """Write ``content`` to ``path`` if it differs, then fix mode and owner."""
        data = content.encode("utf-8")
        changed = False
        if not path.is_file() or path.read_bytes() != data:
            atomic_write(path, data, mode)
            logger.info("Wrote %s", path)
            changed = True
        else:
            logger.debug("Unchanged %s", path)
        return self.ensure_attributes(path, owner, mode) or changed

    def remove(self, path: Path) -> bool:
        """Remove a file. Missing paths are a no-op."""
        if not (path.exists() or path.is_symlink()):
            logger.debug("Already absent %s", path)
            return False
        path.unlink()
        logger.info("Removed %s", path)
        return True

    def remove_directory(self, path: Path) -> bool:
        """Remove ``path`` only if it is an empty directory.

        A directory that still holds files this tool does not manage is kept.
        """
        if not path.is_dir():
            logger.debug("Already absent %s", path)
            return False
        leftover = sorted(p.name for p in path.iterdir())
        if leftover:
            logger.warning("Keeping %s: holds unmanaged entries %s", path, ", ".join(leftover))
            return False
        path.rmdir()
        logger.info("Removed directory %s", path)
        return True
