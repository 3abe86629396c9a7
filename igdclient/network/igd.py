import logging
import re
from typing import Dict

import requests
from bs4 import BeautifulSoup
from yarl import URL

from igdclient.static import SCHEME, REQUEST_TIMEOUT
from igdclient.exceptions import IGDNotFoundError
from igdclient.models import Gateway

logger = logging.getLogger(__name__)


def parse_headers(ssdp_response: bytes) -> Dict[str, str]:
    """
    Returns the headers of an SSDP response, names upper cased
    """

    response = ssdp_response.decode(errors="ignore")
    return {
        name.strip().upper(): value.strip()
        for name, value in re.findall(r"(?P<name>[^\r\n:]+):(?P<value>.*?)\r\n", response)
    }


def find_control_url(profile: bytes, location: str) -> URL:
    """
    Returns the absolute control url of the WANIPConnection service in a device description

    profile - device description xml
    location - url the description was fetched from
    """

    parser = BeautifulSoup(profile, "lxml-xml")
    # look for types of services
    for service in parser.find_all("serviceType"):
        if service.string is None or service.string.strip() != SCHEME:
            continue
        control = service.parent.find("controlURL")
        if control is None or not control.string:
            continue
        # relative to URLBase if given, otherwise to the description location
        base = parser.find("URLBase")
        base_url = URL(base.string.strip()) if base is not None and base.string else URL(location)
        control_url = base_url.join(URL(control.string.strip()))
        # actions are only sent over plain http
        if control_url.scheme != "http":
            raise IGDNotFoundError("Unsupported control url {url}".format(url=control_url))
        return control_url

    raise IGDNotFoundError("No WANIPConnection service at {location}".format(location=location))


class IGD:
    def __init__(self, ssdp_response: bytes, ssdp_address: tuple, timeout: float=REQUEST_TIMEOUT):
        """
        ssdp_response - raw reply to the M-SEARCH request
        ssdp_address - (ip, port) the reply came from
        timeout - seconds to wait for the device description
        """

        self.ip = ssdp_address[0]

        # get location of igd profile from info about igd device
        try:
            profile_location = parse_headers(ssdp_response)["LOCATION"]
        except KeyError:
            raise IGDNotFoundError("SSDP response from {ip} has no location".format(ip=self.ip))

        # look for control url (api to set port forwarding)
        try:
            r = requests.get(profile_location, timeout=timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise IGDNotFoundError("Could not fetch {location}: {error}".format(
                location=profile_location,
                error=e
            )) from e
        self._control_url = find_control_url(r.content, profile_location)
        logger.info("Control url is %s", self._control_url)

    @property
    def gateway(self) -> Gateway:
        url = self._control_url
        return Gateway(url.host, url.port, url.raw_path_qs)
