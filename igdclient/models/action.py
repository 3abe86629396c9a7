import re
from ipaddress import IPv4Address
from typing import NamedTuple, Tuple, Union
from xml.sax.saxutils import escape

from igdclient.static import (
    EXTERNAL_IP_REQUEST,
    ADD_PORT_REQUEST,
    DELETE_PORT_REQUEST,
    GET_EXTERNAL_IP_SOAP_ACTION,
    ADD_PORT_SOAP_ACTION,
    DELETE_PORT_SOAP_ACTION,
)
from igdclient.models.protocol import PortMappingProtocol

MAX_PORT = 65535
MAX_LEASE_DURATION = 2 ** 32 - 1
# characters that may not appear in an XML 1.0 document, even escaped
INVALID_XML_CHARS = re.compile(r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class Action(NamedTuple):
    soap_action: str
    body: str


def _check_port(name: str, port: int) -> int:
    if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= MAX_PORT:
        raise ValueError("{name} must be an integer between 0 and {max}".format(
            name=name,
            max=MAX_PORT
        ))
    return port


def _check_duration(duration: int) -> int:
    if isinstance(duration, bool) or not isinstance(duration, int) or not 0 <= duration <= MAX_LEASE_DURATION:
        raise ValueError("Lease duration must be an integer between 0 and {max}".format(
            max=MAX_LEASE_DURATION
        ))
    return duration


def _check_description(description: str) -> str:
    if not isinstance(description, str) or INVALID_XML_CHARS.search(description):
        raise ValueError("Description must be a string of valid XML characters")
    return escape(description)


def build_external_ip_request() -> Action:
    """
    Returns the GetExternalIPAddress action
    """

    return Action(GET_EXTERNAL_IP_SOAP_ACTION, EXTERNAL_IP_REQUEST)


def build_add_port_request(
    protocol: Union[PortMappingProtocol, str],
    external_port: int,
    local_addr: Tuple[str, int],
    lease_duration: int,
    description: str
) -> Action:
    """
    Returns the AddPortMapping action

    protocol - protocol to allow over port (TCP or UDP)
    external_port - port on the gateway to forward from
    local_addr - (ip, port) on the local network to forward to
    lease_duration - lifetime of the mapping in seconds, 0 for a permanent mapping
    description - description of the mapping shown by the gateway
    """

    internal_ip, internal_port = local_addr
    body = ADD_PORT_REQUEST.format(
        protocol=PortMappingProtocol.coerce(protocol),
        external_port=_check_port("External port", external_port),
        internal_ip=IPv4Address(internal_ip),
        internal_port=_check_port("Internal port", internal_port),
        duration=_check_duration(lease_duration),
        description=_check_description(description),
    )
    return Action(ADD_PORT_SOAP_ACTION, body)


def build_delete_port_request(
    protocol: Union[PortMappingProtocol, str],
    external_port: int
) -> Action:
    """
    Returns the DeletePortMapping action

    protocol - protocol of the mapping (TCP or UDP)
    external_port - port on the gateway the mapping forwards from
    """

    body = DELETE_PORT_REQUEST.format(
        protocol=PortMappingProtocol.coerce(protocol),
        external_port=_check_port("External port", external_port),
    )
    return Action(DELETE_PORT_SOAP_ACTION, body)
