"""
Reads gateway SOAP responses

Responses are matched on the fragments that matter rather than validated as
whole envelopes, gateway firmware is too inconsistent for anything stricter.
"""

import re
from ipaddress import IPv4Address

from bs4 import BeautifulSoup

from igdclient.exceptions import InvalidResponseError

EXTERNAL_IP_PATTERN = re.compile(
    r"<NewExternalIPAddress>(\d+\.\d+\.\d+\.\d+)</NewExternalIPAddress>"
)


def parse_fault(text: str) -> InvalidResponseError:
    """
    Returns the error to raise for a response that did not match

    Carries errorCode and errorDescription if the response is a SOAP fault
    """

    if "errorCode" not in text and "errorDescription" not in text:
        return InvalidResponseError()

    parser = BeautifulSoup(text, "lxml-xml")
    code = parser.find("errorCode")
    description = parser.find("errorDescription")
    return InvalidResponseError(
        error_code=code.get_text(strip=True) if code is not None else None,
        error_description=description.get_text(strip=True) if description is not None else None
    )


def parse_ip(text: str) -> IPv4Address:
    """
    Returns the address in the NewExternalIPAddress element of a response

    Raises InvalidResponseError if it is missing or not a valid dotted quad
    """

    match = EXTERNAL_IP_PATTERN.search(text)
    if match is None:
        raise parse_fault(text)

    try:
        return IPv4Address(match.group(1))
    except ValueError:
        # octet out of range
        raise InvalidResponseError("Invalid external ip {ip}".format(ip=match.group(1)))


def parse_ack(text: str, expected_tag: str):
    """
    Checks that a response acknowledges the action

    expected_tag - namespaced response element, e.g. u:AddPortMappingResponse
    Raises InvalidResponseError if the tag is not in the response
    """

    if expected_tag not in text:
        raise parse_fault(text)
