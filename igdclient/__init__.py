"""
igdclient: UPnP Internet Gateway Device client
Asks a NAT gateway for its external address and adds or removes port mappings
"""

from igdclient.exceptions import (
    IGDNotFoundError,
    RequestError,
    TransportError,
    InvalidResponseError,
)
from igdclient.models import Gateway, PortMappingProtocol
from igdclient.network import Requester, search_gateway
from igdclient.external import get_external_ip, add_port, remove_port

__version__ = "0.1.0"
