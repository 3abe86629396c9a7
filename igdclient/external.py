import logging
from ipaddress import IPv4Address
from typing import Tuple, Union

from igdclient.static import ADD_PORT_RESPONSE_TAG, DELETE_PORT_RESPONSE_TAG
from igdclient.exceptions import RequestError, TransportError, InvalidResponseError
from igdclient.models import (
    Action,
    Gateway,
    PortMappingProtocol,
    build_external_ip_request,
    build_add_port_request,
    build_delete_port_request,
)
from igdclient.network import Requester
from igdclient.parser import parse_ip, parse_ack

logger = logging.getLogger(__name__)

_requester = Requester()


def _send(requester: Requester, gateway: Gateway, action: Action) -> str:
    """
    Sends an action to the gateway through the requester

    Whatever the requester raises reaches the caller as a RequestError
    """

    if requester is None:
        requester = _requester
    try:
        return requester.send(gateway.url, action.soap_action, action.body)
    except RequestError:
        raise
    except Exception as e:
        raise TransportError(e) from e


def get_external_ip(gateway: Gateway, requester: Requester=None) -> IPv4Address:
    """
    Returns the external ip address of the gateway

    requester - transport to send through (default is a Requester with default timeout)
    Raises TransportError or InvalidResponseError
    """

    action = build_external_ip_request()
    text = _send(requester, gateway, action)
    ip = parse_ip(text)
    logger.debug("External ip of %s is %s", gateway, ip)
    return ip


def add_port(
    gateway: Gateway,
    protocol: Union[PortMappingProtocol, str],
    external_port: int,
    local_addr: Tuple[str, int],
    lease_duration: int,
    description: str,
    requester: Requester=None
):
    """
    Maps an external port of the gateway to a local address

    protocol - protocol to allow over port (TCP or UDP)
    external_port - port on the gateway to forward from
    local_addr - (ip, port) on the local network to forward to
    lease_duration - lifetime of the mapping in seconds, 0 for a permanent mapping
    description - description of the mapping shown by the gateway
    requester - transport to send through (default is a Requester with default timeout)

    An existing mapping for the same protocol and external port is overwritten by the gateway
    Raises TransportError or InvalidResponseError, ValueError on invalid arguments
    """

    action = build_add_port_request(protocol, external_port, local_addr, lease_duration, description)
    text = _send(requester, gateway, action)
    try:
        parse_ack(text, ADD_PORT_RESPONSE_TAG)
    except InvalidResponseError as e:
        logger.warning("Gateway %s refused mapping of %s port %s: %s", gateway, protocol, external_port, e)
        raise
    logger.info(
        "Mapped %s port %s to %s:%s",
        protocol, external_port, local_addr[0], local_addr[1]
    )


def remove_port(
    gateway: Gateway,
    protocol: Union[PortMappingProtocol, str],
    external_port: int,
    requester: Requester=None
):
    """
    Removes the mapping of an external port of the gateway

    protocol - protocol of the mapping (TCP or UDP)
    external_port - port on the gateway the mapping forwards from
    requester - transport to send through (default is a Requester with default timeout)

    Whether removing a mapping that does not exist fails is up to the gateway
    Raises TransportError or InvalidResponseError, ValueError on invalid arguments
    """

    action = build_delete_port_request(protocol, external_port)
    text = _send(requester, gateway, action)
    try:
        parse_ack(text, DELETE_PORT_RESPONSE_TAG)
    except InvalidResponseError as e:
        logger.warning("Gateway %s refused removal of %s port %s: %s", gateway, protocol, external_port, e)
        raise
    logger.info("Removed mapping of %s port %s", protocol, external_port)
