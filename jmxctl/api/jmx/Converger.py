"""Apply a JmxPlan to the host through the host primitives."""

from ...utils.logger import get_logger
from ..host.EnvFile import EnvFile
from ..host.FileManager import FileManager
from ..host.Keystore import Keystore
from .ConvergeResult import ConvergeResult
from .JmxPlan import Artifact, EnvFragment, JmxPlan
from .JmxSpec import STORE_PASSWORD

logger = get_logger("jmx.converger")


class Converger:
    """Converge files, key stores and env fragments to a plan.

    Primitive errors propagate unchanged; nothing here retries or swallows them. The
    caller decides on a restart from ``ConvergeResult.changed``.
    """

    def __init__(
        self,
        files: FileManager | None = None,
        env: EnvFile | None = None,
        keystore: Keystore | None = None,
    ):
        self.files = files or FileManager()
        self.env = env or EnvFile()
        self.keystore = keystore or Keystore()

    def _apply_artifact(self, artifact: Artifact) -> bool:
        if artifact.ensure == "absent":
            if artifact.kind == "directory":
                return self.files.remove_directory(artifact.path)
            return self.files.remove(artifact.path)

        if artifact.kind == "directory":
            return self.files.ensure_directory(artifact.path, artifact.owner, artifact.mode)
        if artifact.kind == "file":
            return self.files.ensure_file(artifact.path, artifact.content or "", artifact.owner, artifact.mode)
        if artifact.kind == "keystore":
            changed = self.keystore.import_keypair(
                artifact.path, STORE_PASSWORD, artifact.certificates[0], artifact.private_key
            )
        elif artifact.kind == "truststore":
            changed = self.keystore.sync_trusted_certificates(
                artifact.path, STORE_PASSWORD, list(artifact.certificates)
            )
        else:
            raise ValueError(f"Unknown artifact kind: {artifact.kind!r}")
        return self.files.ensure_attributes(artifact.path, artifact.owner, artifact.mode) or changed

    def _apply_fragment(self, plan: JmxPlan, fragment: EnvFragment) -> bool:
        spec = plan.spec
        return self.env.set_or_remove_subsetting(
            spec.env_file, spec.java_args_var, fragment.key, fragment.value, fragment.ensure
        )

    def converge(self, plan: JmxPlan) -> ConvergeResult:
        """Make the host match ``plan``.

        Present: directory, then files and stores, then env fragments.
        Absent: env fragments first so the JVM no longer points at the files, then the
        files, then the directory if nothing unmanaged is left in it.
        """
        spec = plan.spec
        result = ConvergeResult(service=spec.service, ensure=spec.ensure)
        logger.info("Converging %s (ensure=%s)", spec.service, spec.ensure)

        if spec.present:
            steps = [(a.name, lambda a=a: self._apply_artifact(a)) for a in plan.artifacts]
            steps += [(f.key, lambda f=f: self._apply_fragment(plan, f)) for f in plan.fragments]
        else:
            steps = [(f.key, lambda f=f: self._apply_fragment(plan, f)) for f in plan.fragments]
            steps += [(a.name, lambda a=a: self._apply_artifact(a)) for a in reversed(plan.artifacts)]

        for name, step in steps:
            if step():
                result.changed.append(name)

        if result.changed:
            logger.info("%s changed: %s", spec.service, ", ".join(result.changed))
        else:
            logger.debug("%s already converged", spec.service)
        return result
