"""Resolve a user name to the uid/gid pair used for chown."""

import pwd


def resolve_owner(user: str) -> tuple[int, int]:
    """Return (uid, primary gid) for ``user``.

    Raises:
        ValueError: If the user does not exist on this host
    """
    try:
        entry = pwd.getpwnam(user)
    except KeyError as e:
        raise ValueError(f"Unknown user {user!r}: create it before configuring JMX") from e
    return entry.pw_uid, entry.pw_gid
