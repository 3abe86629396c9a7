import logging
import socket

from igdclient.static import SSDP_ADDRESS, SSDP_REQUEST, SLEEP_TIME
from igdclient.exceptions import IGDNotFoundError
from igdclient.network.igd import IGD

logger = logging.getLogger(__name__)


class SSDP:
    def __init__(self, timeout: float=SLEEP_TIME):
        """
        timeout - how long to wait for an IGD to answer in seconds

        Raises IGDNotFoundError if no IGD answers in time
        """

        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.settimeout(timeout)
            logger.debug("Looking for IGD")
            try:
                sock.sendto(SSDP_REQUEST, SSDP_ADDRESS)
                self.response, self.address = sock.recvfrom(4096)
            except socket.timeout:
                raise IGDNotFoundError("Could not find a UPnP enabled IGD")
            except OSError as e:
                raise IGDNotFoundError("SSDP search failed: {error}".format(error=e)) from e
        logger.debug("IGD detected at %s", self.address[0])

    def get_igd(self) -> IGD:
        return IGD(self.response, self.address)
