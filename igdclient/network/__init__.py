from .igd import IGD
from .ssdp import SSDP
from .requester import Requester

from igdclient.static import SLEEP_TIME
from igdclient.models import Gateway


def search_gateway(timeout: float=SLEEP_TIME) -> Gateway:
    """
    Finds the gateway of the local network

    timeout - how long to wait for an IGD to answer in seconds
    Raises IGDNotFoundError if there is none
    """

    return SSDP(timeout).get_igd().gateway
