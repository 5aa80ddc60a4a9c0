"""Keystore primitive - PKCS#12 key and trust stores for the JMX connector.

The identity keystore is written directly with ``cryptography``. Trust stores need the
Java "trusted certificate" attribute on each entry, so they are driven through
``keytool``, which every JDK ships.
"""

import os
import shutil
import subprocess
import tempfile
from pathlib import Path

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.serialization import pkcs12

from ...utils.logger import get_logger
from .atomic_write import atomic_write

logger = get_logger("host.keystore")

KEY_ALIAS = "jmx"
CLIENT_ALIAS_PREFIX = "client-"
_STOREPASS_ENV = "JMXCTL_STOREPASS"


def _private_key_der(key) -> bytes:
    return key.private_bytes(
        serialization.Encoding.DER,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )


def trusted_alias(certificate: x509.Certificate) -> str:
    """Alias a trusted certificate by its fingerprint so reordering the list is a no-op."""
    return f"{CLIENT_ALIAS_PREFIX}{certificate.fingerprint(hashes.SHA256()).hex()[:16]}"


class Keystore:
    """Idempotent import of JMX key material."""

    def import_keypair(
        self,
        path: Path,
        password: str,
        certificate: x509.Certificate,
        private_key,
        alias: str = KEY_ALIAS,
    ) -> bool:
        """Ensure ``path`` is a keystore holding exactly this certificate and key.

        Re-imports whenever the stored certificate or key differs from the given ones.

        Returns:
            True if the keystore was (re)written
        """
        wanted_cert = certificate.public_bytes(serialization.Encoding.DER)
        wanted_key = _private_key_der(private_key)

        if path.is_file():
            try:
                key, cert, _ = pkcs12.load_key_and_certificates(path.read_bytes(), password.encode())
            except ValueError:
                logger.warning("Existing keystore %s unreadable with the managed password, replacing", path)
            else:
                if (
                    cert is not None
                    and key is not None
                    and cert.public_bytes(serialization.Encoding.DER) == wanted_cert
                    and _private_key_der(key) == wanted_key
                ):
                    logger.debug("Keystore %s already current", path)
                    return False

        data = pkcs12.serialize_key_and_certificates(
            name=alias.encode(),
            key=private_key,
            cert=certificate,
            cas=None,
            encryption_algorithm=serialization.BestAvailableEncryption(password.encode()),
        )
        atomic_write(path, data, 0o600)
        logger.info("Imported key pair %r into %s", alias, path)
        return True

    @staticmethod
    def _keytool() -> str:
        keytool = shutil.which("keytool")
        if not keytool:
            raise RuntimeError("keytool command not found in PATH. Install a JDK to manage JMX trust stores.")
        return keytool

    def _run_keytool(self, password: str, *args: str) -> str:
        env = dict(os.environ)
        env[_STOREPASS_ENV] = password
        cmd = [self._keytool(), *args, "-storetype", "PKCS12", "-storepass:env", _STOREPASS_ENV]
        try:
            result = subprocess.run(cmd, check=True, capture_output=True, text=True, env=env)
        except subprocess.CalledProcessError as e:
            detail = (e.stdout or "").strip() or (e.stderr or "").strip()
            raise RuntimeError(f"keytool {args[0]} failed: {detail}") from e
        return result.stdout

    def list_trusted_aliases(self, path: Path, password: str) -> set[str]:
        """Return the trusted-certificate aliases in a trust store (empty if it does not exist)."""
        if not path.is_file():
            return set()
        output = self._run_keytool(password, "-list", "-keystore", str(path))
        aliases = set()
        for line in output.splitlines():
            if "trustedCertEntry" in line:
                aliases.add(line.split(",", 1)[0].strip())
        return aliases

    def sync_trusted_certificates(self, path: Path, password: str, certificates: list[x509.Certificate]) -> bool:
        """Ensure the trust store holds exactly ``certificates`` under managed aliases.

        Each certificate is imported once under its fingerprint alias; managed aliases
        that are no longer wanted are deleted. Foreign aliases are left alone.

        Returns:
            True if the trust store was changed
        """
        wanted = {trusted_alias(cert): cert for cert in certificates}
        existing = self.list_trusted_aliases(path, password)
        changed = False

        for alias, cert in wanted.items():
            if alias in existing:
                continue
            with tempfile.TemporaryDirectory() as tmp:
                pem_path = Path(tmp) / f"{alias}.pem"
                pem_path.write_bytes(cert.public_bytes(serialization.Encoding.PEM))
                self._run_keytool(
                    password,
                    "-importcert",
                    "-noprompt",
                    "-alias",
                    alias,
                    "-file",
                    str(pem_path),
                    "-keystore",
                    str(path),
                )
            logger.info("Trusted client certificate %r in %s", alias, path)
            changed = True

        for alias in sorted(existing - set(wanted)):
            if not alias.startswith(CLIENT_ALIAS_PREFIX):
                continue
            self._run_keytool(password, "-delete", "-alias", alias, "-keystore", str(path))
            logger.info("Removed client certificate %r from %s", alias, path)
            changed = True

        return changed
