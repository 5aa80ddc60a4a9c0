"""Unit tests for the property derivation rule table."""

import pytest

from jmxctl.api.jmx.derive_properties import (
    PREFIX,
    access_rule,
    auth_rule,
    client_auth_rule,
    derive_properties,
    ssl_config_rule,
    ssl_rule,
)
from jmxctl.api.jmx.JmxConfig import JmxConfig
from jmxctl.api.jmx.JmxSpec import STORE_PASSWORD


def _spec(tmp_path, **options):
    return JmxConfig(config_dir=tmp_path / "jmx", **options).resolve("tomcat")


def _material(pem_pair, client_pem, keypair: bool, client: bool) -> dict:
    cert_pem, key_pem = pem_pair
    options: dict = {}
    if keypair:
        options["keypair"] = {"cert": cert_pem, "key": key_pem}
    if client:
        options["client_certs"] = [client_pem]
    return options


def test_base_properties(tmp_path):
    props = derive_properties(_spec(tmp_path, port=9010, rmi_port=9011, rmi_hostname="10.0.0.5")).management
    assert props[PREFIX] == "true"
    assert props[f"{PREFIX}.port"] == "9010"
    assert props[f"{PREFIX}.rmi.port"] == "9011"
    assert props["java.rmi.server.hostname"] == "10.0.0.5"
    assert props[f"{PREFIX}.local.only"] == "true"


def test_unset_optionals_omitted(tmp_path):
    props = derive_properties(_spec(tmp_path, local_only=False)).management
    assert f"{PREFIX}.port" not in props
    assert f"{PREFIX}.rmi.port" not in props
    assert "java.rmi.server.hostname" not in props
    assert props[f"{PREFIX}.local.only"] == "false"


def test_no_users_disables_authentication(tmp_path):
    props = derive_properties(_spec(tmp_path)).management
    assert props[f"{PREFIX}.authenticate"] == "false"
    assert f"{PREFIX}.password.file" not in props


def test_users_enable_authentication(tmp_path):
    props = derive_properties(_spec(tmp_path, users={"monitor": "secret"})).management
    assert props[f"{PREFIX}.authenticate"] == "true"
    assert props[f"{PREFIX}.password.file"] == str(tmp_path / "jmx" / "jmxremote.password")


def test_access_file_only_with_roles(tmp_path):
    assert f"{PREFIX}.access.file" not in derive_properties(_spec(tmp_path)).management
    props = derive_properties(_spec(tmp_path, roles={"monitor": "readonly"})).management
    assert props[f"{PREFIX}.access.file"] == str(tmp_path / "jmx" / "jmxremote.access")


def test_no_keypair_disables_ssl(tmp_path):
    props = derive_properties(_spec(tmp_path)).management
    assert props[f"{PREFIX}.ssl"] == "false"
    assert props[f"{PREFIX}.registry.ssl"] == "false"
    assert props[f"{PREFIX}.ssl.need.client.auth"] == "false"
    assert not any(key.startswith("javax.net.ssl.") for key in props)


def test_keypair_enables_ssl(tmp_path, pem_pair, client_pem):
    props = derive_properties(_spec(tmp_path, **_material(pem_pair, client_pem, True, False))).management
    assert props[f"{PREFIX}.ssl"] == "true"
    assert props[f"{PREFIX}.registry.ssl"] == "true"
    assert props[f"{PREFIX}.ssl.enabled.protocols"] == "TLSv1.2,TLSv1.3"
    assert props["javax.net.ssl.keyStore"] == str(tmp_path / "jmx" / "jmx.ks")
    assert props["javax.net.ssl.keyStorePassword"] == STORE_PASSWORD
    assert props[f"{PREFIX}.ssl.need.client.auth"] == "false"
    assert "javax.net.ssl.trustStore" not in props


def test_client_certs_require_client_auth(tmp_path, pem_pair, client_pem):
    props = derive_properties(_spec(tmp_path, **_material(pem_pair, client_pem, False, True))).management
    assert props[f"{PREFIX}.ssl.need.client.auth"] == "true"
    assert props["javax.net.ssl.trustStore"] == str(tmp_path / "jmx" / "jmx.ts")
    assert props["javax.net.ssl.trustStorePassword"] == STORE_PASSWORD
    assert props[f"{PREFIX}.ssl"] == "false"


@pytest.mark.parametrize(
    "keypair,client,expected",
    [(False, False, False), (True, False, True), (False, True, True), (True, True, True)],
)
def test_ssl_config_file_iff_any_store(tmp_path, pem_pair, client_pem, keypair, client, expected):
    props = derive_properties(_spec(tmp_path, **_material(pem_pair, client_pem, keypair, client))).management
    key = f"{PREFIX}.ssl.config.file"
    assert (key in props) is expected
    if expected:
        assert props[key] == str(tmp_path / "jmx" / "ssl.properties")


def test_ssl_subset(tmp_path, pem_pair, client_pem):
    properties = derive_properties(_spec(tmp_path, **_material(pem_pair, client_pem, True, True)))
    assert set(properties.ssl) == {
        "javax.net.ssl.keyStore",
        "javax.net.ssl.keyStorePassword",
        "javax.net.ssl.trustStore",
        "javax.net.ssl.trustStorePassword",
    }


def test_rules_write_disjoint_keys(tmp_path, pem_pair, client_pem):
    spec = _spec(tmp_path, users={"u": "p"}, roles={"u": "readonly"}, **_material(pem_pair, client_pem, True, True))
    seen: set[str] = set()
    for rule in (auth_rule, access_rule, ssl_rule, client_auth_rule, ssl_config_rule):
        keys = set(rule(spec))
        assert not keys & seen
        seen |= keys


def test_overrides_merged_last(tmp_path):
    props = derive_properties(
        _spec(tmp_path, properties={"com.sun.management.jmxremote.port": 1099, "custom.key": "v"})
    ).management
    assert props[f"{PREFIX}.port"] == "1099"
    assert props["custom.key"] == "v"
    assert list(props)[-1] == "custom.key"


def test_absent_spec_has_no_properties(tmp_path):
    properties = derive_properties(_spec(tmp_path, ensure="absent", users={"u": "p"}))
    assert properties.management == {}
    assert properties.ssl == {}
