"""Build the convergence plan for a resolved JmxSpec. Pure: never touches the host."""

from .derive_properties import derive_properties
from .JmxPlan import Artifact, EnvFragment, JmxPlan
from .JmxSpec import JmxSpec
from .render import render_pairs, render_properties

JMXREMOTE_FLAG = "-Dcom.sun.management.jmxremote"
CONFIG_FILE_ARG = "-Dcom.sun.management.config.file"
RMI_HOSTNAME_ARG = "-Djava.rmi.server.hostname"

FILE_MODE = 0o600
DIRECTORY_MODE = 0o700


def _ensure(wanted: bool) -> str:
    return "present" if wanted else "absent"


def build_plan(spec: JmxSpec) -> JmxPlan:
    """Return every managed artifact and env fragment with its desired state.

    Artifacts that the current options do not need are listed as absent, so switching a
    feature off removes its files on the next run.
    """
    properties = derive_properties(spec)
    present = spec.present
    owner = spec.service_user
    needs_ssl_file = present and (spec.has_keypair or spec.has_client_certs)

    artifacts = (
        Artifact("config_dir", spec.config_dir, "directory", _ensure(present), owner, DIRECTORY_MODE),
        Artifact(
            "management.properties",
            spec.management_file,
            "file",
            _ensure(present),
            owner,
            FILE_MODE,
            content=render_properties(spec.service, properties.management) if present else None,
        ),
        Artifact(
            "jmxremote.password",
            spec.password_file,
            "file",
            _ensure(present and bool(spec.users)),
            owner,
            FILE_MODE,
            content=render_pairs(spec.service, spec.users) if present and spec.users else None,
        ),
        Artifact(
            "jmxremote.access",
            spec.access_file,
            "file",
            _ensure(present and bool(spec.roles)),
            owner,
            FILE_MODE,
            content=render_pairs(spec.service, spec.roles) if present and spec.roles else None,
        ),
        Artifact(
            "ssl.properties",
            spec.ssl_file,
            "file",
            _ensure(needs_ssl_file),
            owner,
            FILE_MODE,
            content=render_properties(spec.service, properties.ssl) if needs_ssl_file else None,
        ),
        Artifact(
            "jmx.ks",
            spec.keystore_file,
            "keystore",
            _ensure(present and spec.has_keypair),
            owner,
            FILE_MODE,
            certificates=(spec.certificate,) if spec.has_keypair else (),
            private_key=spec.private_key,
        ),
        Artifact(
            "jmx.ts",
            spec.truststore_file,
            "truststore",
            _ensure(present and spec.has_client_certs),
            owner,
            FILE_MODE,
            certificates=spec.client_certificates,
        ),
    )

    fragments = (
        EnvFragment(JMXREMOTE_FLAG, None, _ensure(present)),
        EnvFragment(CONFIG_FILE_ARG, str(spec.management_file), _ensure(present)),
        EnvFragment(RMI_HOSTNAME_ARG, spec.rmi_hostname, _ensure(present and spec.rmi_hostname is not None)),
    )

    return JmxPlan(spec=spec, properties=properties, artifacts=artifacts, fragments=fragments)
