from enum import Enum
from typing import Union


class PortMappingProtocol(Enum):
    TCP = "TCP"
    UDP = "UDP"

    @classmethod
    def coerce(cls, protocol: Union["PortMappingProtocol", str]) -> "PortMappingProtocol":
        """
        Returns the protocol for an enum member or a "tcp"/"udp" string (any case)

        Raises ValueError for anything else
        """

        if isinstance(protocol, cls):
            return protocol
        if isinstance(protocol, str) and protocol.upper() in cls.__members__:
            return cls[protocol.upper()]
        raise ValueError("Protocol must be TCP or UDP")

    def __str__(self) -> str:
        return self.value
