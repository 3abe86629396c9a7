"""Tests for the SOAP request builders."""

from ipaddress import IPv4Address

import pytest

from igdclient.models import (
    PortMappingProtocol,
    build_external_ip_request,
    build_add_port_request,
    build_delete_port_request,
)


class TestExternalIpRequest:
    def test_soap_action_header(self):
        action = build_external_ip_request()
        assert action.soap_action == '"urn:schemas-upnp-org:service:WANIPConnection:1#GetExternalIPAddress"'

    def test_body_is_deterministic(self):
        assert build_external_ip_request().body == build_external_ip_request().body

    def test_body_envelope(self):
        body = build_external_ip_request().body
        assert 'encodingStyle="http://schemas.xmlsoap.org/soap/encoding/"' in body
        assert '<m:GetExternalIPAddress xmlns:m="urn:schemas-upnp-org:service:WANIPConnection:1">' in body


class TestAddPortRequest:
    def build(self, **kwargs):
        params = dict(
            protocol=PortMappingProtocol.TCP,
            external_port=51413,
            local_addr=("192.168.1.42", 51413),
            lease_duration=0,
            description="test",
        )
        params.update(kwargs)
        return build_add_port_request(**params)

    def test_body_contains_mapping_fields(self):
        body = self.build().body
        assert "<NewProtocol>TCP</NewProtocol>" in body
        assert "<NewExternalPort>51413</NewExternalPort>" in body
        assert "<NewInternalClient>192.168.1.42</NewInternalClient>" in body
        assert "<NewInternalPort>51413</NewInternalPort>" in body
        assert "<NewLeaseDuration>0</NewLeaseDuration>" in body
        assert "<NewPortMappingDescription>test</NewPortMappingDescription>" in body
        assert "<NewEnabled>1</NewEnabled>" in body
        assert "<NewRemoteHost></NewRemoteHost>" in body

    def test_fields_in_fixed_order(self):
        body = self.build().body
        tags = [
            "NewProtocol", "NewExternalPort", "NewInternalClient", "NewInternalPort",
            "NewLeaseDuration", "NewPortMappingDescription", "NewEnabled", "NewRemoteHost",
        ]
        positions = [body.index("<{}>".format(tag)) for tag in tags]
        assert positions == sorted(positions)

    def test_soap_action_header(self):
        assert self.build().soap_action == '"urn:schemas-upnp-org:service:WANIPConnection:1#AddPortMapping"'

    def test_accepts_protocol_string_and_address_object(self):
        body = self.build(protocol="udp", local_addr=(IPv4Address("10.0.0.2"), 8080)).body
        assert "<NewProtocol>UDP</NewProtocol>" in body
        assert "<NewInternalClient>10.0.0.2</NewInternalClient>" in body

    def test_description_is_escaped(self):
        body = self.build(description="a<b & c>").body
        assert "<NewPortMappingDescription>a&lt;b &amp; c&gt;</NewPortMappingDescription>" in body

    def test_description_keeps_whitespace_and_unicode(self):
        body = self.build(description="line\tone\nzwölf \U0001f600").body
        assert "<NewPortMappingDescription>line\tone\nzwölf \U0001f600</NewPortMappingDescription>" in body

    @pytest.mark.parametrize("kwargs", [
        {"external_port": 65536},
        {"external_port": -1},
        {"local_addr": ("192.168.1.42", 70000)},
        {"local_addr": ("not an ip", 80)},
        {"lease_duration": -1},
        {"lease_duration": 2 ** 32},
        {"protocol": "SCTP"},
        {"description": "a\x01b"},
        {"description": "\x00"},
        {"description": None},
        {"description": 42},
    ])
    def test_rejects_invalid_arguments(self, kwargs):
        with pytest.raises(ValueError):
            self.build(**kwargs)

    def test_port_bounds_are_inclusive(self):
        body = self.build(external_port=65535, local_addr=("192.168.1.42", 0)).body
        assert "<NewExternalPort>65535</NewExternalPort>" in body
        assert "<NewInternalPort>0</NewInternalPort>" in body


class TestDeletePortRequest:
    def test_body_contains_mapping_key(self):
        action = build_delete_port_request(PortMappingProtocol.UDP, 500)
        assert action.soap_action == '"urn:schemas-upnp-org:service:WANIPConnection:1#DeletePortMapping"'
        assert "<NewProtocol>UDP</NewProtocol>" in action.body
        assert "<NewExternalPort>500</NewExternalPort>" in action.body
        assert "<NewRemoteHost>" in action.body
        assert action.body.index("<NewExternalPort>") < action.body.index("<NewRemoteHost>")

    def test_rejects_invalid_port(self):
        with pytest.raises(ValueError):
            build_delete_port_request(PortMappingProtocol.TCP, 100000)
