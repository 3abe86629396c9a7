import logging
from typing import Dict

import requests

from igdclient.static import REQUEST_TIMEOUT
from igdclient.exceptions import TransportError

logger = logging.getLogger(__name__)


class Requester:
    def __init__(self, timeout: float=REQUEST_TIMEOUT, session: requests.Session=None):
        """
        timeout - seconds to wait for the gateway to answer
        session - requests session to send through (default is a new connection per request)
        """

        self.timeout = timeout
        self.session = session

    @staticmethod
    def make_headers(soap_action: str) -> Dict[str, str]:
        """
        Generates headers for request

        soap_action - quoted SOAPAction header value
        """

        return {
            "SOAPAction": soap_action,
            "Content-Type": 'text/xml; charset="utf-8"'
        }

    def send(self, url: str, soap_action: str, body: str) -> str:
        """
        Posts a SOAP body to a control url and returns the response text

        Any HTTP status is returned as is, SOAP faults come back as 500 with a body
        Raises TransportError if no response could be read
        """

        post = self.session.post if self.session is not None else requests.post
        logger.debug("POST %s %s", url, soap_action)
        try:
            r = post(
                url,
                headers=self.make_headers(soap_action),
                data=body.encode("utf-8"),
                timeout=self.timeout
            )
            text = r.text
        except requests.RequestException as e:
            logger.debug("Request to %s failed: %s", url, e)
            raise TransportError(e) from e

        logger.debug("Response %s from %s: %s", r.status_code, url, text)
        return text
