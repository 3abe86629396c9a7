from .protocol import PortMappingProtocol
from .gateway import Gateway
from .action import (
    Action,
    build_external_ip_request,
    build_add_port_request,
    build_delete_port_request,
)
