class Gateway:
    def __init__(self, host: str, port: int, control_url: str):
        """
        host - ip address of the gateway
        port - http port of the gateway
        control_url - path of the WANIPConnection control endpoint (e.g. "/ctl/IPConn")

        Actions are always sent over plain http
        """

        self._host = host
        self._port = port
        self._control_url = control_url

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def control_url(self) -> str:
        return self._control_url

    @property
    def url(self) -> str:
        return "http://{host}:{port}{path}".format(
            host=self._host,
            port=self._port,
            path=self._control_url
        )

    def _key(self):
        return (self._host, self._port, self._control_url)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Gateway):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"Gateway(host={self._host}, port={self._port}, control_url={self._control_url})"
