"""Unit tests for jmxctl.api.jmx.build_plan."""

from jmxctl.api.jmx.build_plan import CONFIG_FILE_ARG, JMXREMOTE_FLAG, RMI_HOSTNAME_ARG, build_plan
from jmxctl.api.jmx.JmxConfig import JmxConfig


def _plan(tmp_path, **options):
    return build_plan(JmxConfig(config_dir=tmp_path / "jmx", service_user="svc", **options).resolve("tomcat"))


def _by_name(plan):
    return {artifact.name: artifact for artifact in plan.artifacts}


def test_minimal_plan(tmp_path):
    artifacts = _by_name(_plan(tmp_path))
    assert artifacts["config_dir"].ensure == "present"
    assert artifacts["config_dir"].mode == 0o700
    assert artifacts["management.properties"].ensure == "present"
    assert artifacts["management.properties"].mode == 0o600
    for name in ("jmxremote.password", "jmxremote.access", "ssl.properties", "jmx.ks", "jmx.ts"):
        assert artifacts[name].ensure == "absent", name
    assert all(a.owner == "svc" for a in artifacts.values())


def test_management_properties_content(tmp_path):
    content = _by_name(_plan(tmp_path, port=9010))["management.properties"].content
    lines = content.splitlines()
    assert lines[0].startswith("# Managed by jmxctl for tomcat")
    assert "com.sun.management.jmxremote=true" in lines
    assert "com.sun.management.jmxremote.port=9010" in lines
    assert "com.sun.management.jmxremote.authenticate=false" in lines
    assert content.endswith("\n")


def test_password_and_access_files(tmp_path):
    artifacts = _by_name(_plan(tmp_path, users={"monitor": "s3cret", "admin": "pw"}, roles={"monitor": "readonly"}))
    assert artifacts["jmxremote.password"].ensure == "present"
    assert artifacts["jmxremote.password"].content.splitlines()[1:] == ["monitor s3cret", "admin pw"]
    assert artifacts["jmxremote.access"].content.splitlines()[1:] == ["monitor readonly"]


def test_ssl_artifacts(tmp_path, pem_pair, client_pem):
    cert_pem, key_pem = pem_pair
    artifacts = _by_name(_plan(tmp_path, keypair={"cert": cert_pem, "key": key_pem}, client_certs=[client_pem]))
    assert artifacts["jmx.ks"].ensure == "present"
    assert artifacts["jmx.ks"].private_key is not None
    assert len(artifacts["jmx.ks"].certificates) == 1
    assert artifacts["jmx.ts"].ensure == "present"
    assert len(artifacts["jmx.ts"].certificates) == 1
    ssl_lines = artifacts["ssl.properties"].content.splitlines()
    assert f"javax.net.ssl.keyStore={tmp_path / 'jmx' / 'jmx.ks'}" in ssl_lines
    assert f"javax.net.ssl.trustStore={tmp_path / 'jmx' / 'jmx.ts'}" in ssl_lines
    assert not any(line.startswith("com.sun.management") for line in ssl_lines)


def test_fragments_with_hostname(tmp_path):
    fragments = _plan(tmp_path, rmi_hostname="10.0.0.5").fragments
    assert [(f.key, f.value, f.ensure) for f in fragments] == [
        (JMXREMOTE_FLAG, None, "present"),
        (CONFIG_FILE_ARG, str(tmp_path / "jmx" / "management.properties"), "present"),
        (RMI_HOSTNAME_ARG, "10.0.0.5", "present"),
    ]
    assert fragments[0].text == "-Dcom.sun.management.jmxremote"


def test_hostname_fragment_removed_when_unset(tmp_path):
    fragments = _plan(tmp_path).fragments
    assert fragments[2].key == RMI_HOSTNAME_ARG
    assert fragments[2].ensure == "absent"


def test_absent_plan_removes_everything(tmp_path, pem_pair):
    cert_pem, key_pem = pem_pair
    plan = _plan(tmp_path, ensure="absent", users={"u": "p"}, keypair={"cert": cert_pem, "key": key_pem})
    assert all(a.ensure == "absent" for a in plan.artifacts)
    assert all(f.ensure == "absent" for f in plan.fragments)
    assert all(a.content is None for a in plan.artifacts)


def test_describe_hides_secrets(tmp_path):
    described = _by_name(_plan(tmp_path, users={"u": "p"}))["jmxremote.password"].describe()
    assert described == {
        "name": "jmxremote.password",
        "path": str(tmp_path / "jmx" / "jmxremote.password"),
        "kind": "file",
        "ensure": "present",
        "owner": "svc",
        "mode": "0600",
    }


def test_ssl_override_alone_writes_no_ssl_file(tmp_path):
    plan = _plan(tmp_path, properties={"javax.net.ssl.trustStoreType": "PKCS12"})
    artifacts = _by_name(plan)
    assert artifacts["ssl.properties"].ensure == "absent"
    assert artifacts["ssl.properties"].content is None
    assert "com.sun.management.jmxremote.ssl.config.file" not in plan.properties.management


def test_ssl_override_lands_in_ssl_file(tmp_path, pem_pair):
    cert_pem, key_pem = pem_pair
    artifacts = _by_name(
        _plan(
            tmp_path,
            keypair={"cert": cert_pem, "key": key_pem},
            properties={"javax.net.ssl.keyStoreType": "PKCS12"},
        )
    )
    assert "javax.net.ssl.keyStoreType=PKCS12" in artifacts["ssl.properties"].content.splitlines()
