SCHEME = "urn:schemas-upnp-org:service:WANIPConnection:1"
SSDP_ADDRESS = ("239.255.255.250", 1900)
SSDP_REQUEST = (
    b"M-SEARCH * HTTP/1.1\r\n"
    b"Host:239.255.255.250:1900\r\n"
    b"ST:urn:schemas-upnp-org:device:InternetGatewayDevice:1\r\n"
    b'Man:"ssdp:discover"\r\n'
    b"MX:3\r\n"
    b"\r\n"
)
# seconds to wait for an ssdp reply
SLEEP_TIME = 3
# seconds to wait on a gateway http call
REQUEST_TIMEOUT = 10

GET_EXTERNAL_IP_SOAP_ACTION = '"{scheme}#GetExternalIPAddress"'.format(scheme=SCHEME)
ADD_PORT_SOAP_ACTION = '"{scheme}#AddPortMapping"'.format(scheme=SCHEME)
DELETE_PORT_SOAP_ACTION = '"{scheme}#DeletePortMapping"'.format(scheme=SCHEME)

ADD_PORT_RESPONSE_TAG = "u:AddPortMappingResponse"
DELETE_PORT_RESPONSE_TAG = "u:DeletePortMappingResponse"

EXTERNAL_IP_REQUEST = """<SOAP-ENV:Envelope SOAP-ENV:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/" xmlns:SOAP-ENV="http://schemas.xmlsoap.org/soap/envelope/">
    <SOAP-ENV:Body>
        <m:GetExternalIPAddress xmlns:m="urn:schemas-upnp-org:service:WANIPConnection:1">
        </m:GetExternalIPAddress>
    </SOAP-ENV:Body>
</SOAP-ENV:Envelope>"""

ADD_PORT_REQUEST = """<?xml version="1.0"?>
<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/" s:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">
<s:Body>
    <u:AddPortMapping xmlns:u="urn:schemas-upnp-org:service:WANIPConnection:1">
        <NewProtocol>{protocol}</NewProtocol>
        <NewExternalPort>{external_port}</NewExternalPort>
        <NewInternalClient>{internal_ip}</NewInternalClient>
        <NewInternalPort>{internal_port}</NewInternalPort>
        <NewLeaseDuration>{duration}</NewLeaseDuration>
        <NewPortMappingDescription>{description}</NewPortMappingDescription>
        <NewEnabled>1</NewEnabled>
        <NewRemoteHost></NewRemoteHost>
    </u:AddPortMapping>
</s:Body>
</s:Envelope>
"""

DELETE_PORT_REQUEST = """<?xml version="1.0"?>
<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/" s:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">
  <s:Body>
    <u:DeletePortMapping xmlns:u="urn:schemas-upnp-org:service:WANIPConnection:1">
      <NewProtocol>{protocol}</NewProtocol>
      <NewExternalPort>{external_port}</NewExternalPort>
      <NewRemoteHost>
      </NewRemoteHost>
    </u:DeletePortMapping>
  </s:Body>
</s:Envelope>
"""
