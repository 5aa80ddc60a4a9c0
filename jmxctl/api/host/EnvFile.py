"""Line editor for fragments inside a quoted shell variable of an environment file.

Manages one ``key`` or ``key=value`` fragment of a line such as::

    JAVA_ARGS="-Xmx512m -Dcom.sun.management.jmxremote"

without touching sibling fragments, other variables or comments.
"""

import re
from pathlib import Path

from ...utils.logger import get_logger
from .atomic_write import atomic_write

logger = get_logger("host.envfile")

_VARIABLE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class EnvFile:
    """Idempotent add/replace/remove of fragments in an env file variable."""

    @staticmethod
    def _line_pattern(variable: str) -> re.Pattern[str]:
        return re.compile(rf"^(?P<prefix>\s*(?:export\s+)?{re.escape(variable)}=)(?P<value>.*)$")

    @staticmethod
    def _split_value(raw: str) -> tuple[str, list[str], str]:
        """Return (quote character, fragments, trailing text) for the right-hand side.

        The value ends at its closing quote, or at the first whitespace when unquoted;
        whatever follows (usually a comment) is returned verbatim.

        Raises:
            ValueError: If a quoted value is never closed
        """
        if raw[:1] in ('"', "'"):
            quote = raw[0]
            end = 1
            while end < len(raw) and raw[end] != quote:
                # Backslash escapes only apply inside double quotes
                end += 2 if quote == '"' and raw[end] == "\\" else 1
            if end >= len(raw):
                raise ValueError(f"Unterminated {quote} quote in {raw!r}")
            return quote, raw[1:end].split(), raw[end + 1 :]
        match = re.match(r"(\S*)(.*)", raw)
        return "", match.group(1).split(), match.group(2)

    @staticmethod
    def _matches(fragment: str, key: str) -> bool:
        return fragment == key or fragment.startswith(f"{key}=")

    def set_or_remove_subsetting(
        self,
        file_path: Path,
        variable: str,
        key: str,
        value: str | None = None,
        ensure: str = "present",
    ) -> bool:
        """Ensure a fragment is present (with ``value``) or absent in ``variable``.

        Args:
            file_path: Environment file (e.g. /etc/sysconfig/tomcat)
            variable: Shell variable holding the Java arguments (e.g. JAVA_ARGS)
            key: Fragment key, e.g. ``-Dcom.sun.management.config.file``
            value: Fragment value; None for a bare flag
            ensure: "present" or "absent"

        Returns:
            True if the file was changed
        """
        if ensure not in ("present", "absent"):
            raise ValueError(f"ensure must be 'present' or 'absent', got {ensure!r}")
        if not _VARIABLE_NAME.match(variable):
            raise ValueError(f"Invalid shell variable name: {variable!r}")

        fragment = key if value is None else f"{key}={value}"
        if any(c.isspace() for c in fragment) or '"' in fragment or "'" in fragment:
            raise ValueError(f"Fragment must not contain whitespace or quotes: {fragment!r}")

        if not file_path.exists():
            if ensure == "absent":
                logger.debug("Already absent %s in %s (no file)", key, file_path)
                return False
            original = ""
        else:
            original = file_path.read_text(encoding="utf-8")

        lines = original.splitlines()
        pattern = self._line_pattern(variable)
        found = False
        changed = False
        for index, line in enumerate(lines):
            match = pattern.match(line)
            if not match:
                continue
            found = True
            quote, fragments, rest = self._split_value(match.group("value"))
            kept = [f for f in fragments if not self._matches(f, key)]
            if ensure == "present":
                positions = [i for i, f in enumerate(fragments) if self._matches(f, key)]
                if positions:
                    # Replace in place, dropping any duplicates of the same key
                    kept.insert(positions[0], fragment)
                else:
                    kept.append(fragment)
            if kept == fragments:
                continue
            quote = quote or '"'
            lines[index] = f"{match.group('prefix')}{quote}{' '.join(kept)}{quote}{rest}"
            changed = True

        if not found:
            if ensure == "absent":
                logger.debug("Already absent %s in %s (no %s line)", key, file_path, variable)
                return False
            lines.append(f'{variable}="{fragment}"')
            changed = True

        if not changed:
            logger.debug("Unchanged %s in %s", key, file_path)
            return False

        updated = "\n".join(lines) + "\n"

        if file_path.exists():
            mode = file_path.stat().st_mode & 0o7777
        else:
            mode = 0o644
            file_path.parent.mkdir(parents=True, exist_ok=True)
        atomic_write(file_path, updated.encode("utf-8"), mode)
        logger.info("%s %s in %s:%s", "Set" if ensure == "present" else "Removed", key, file_path, variable)
        return True
