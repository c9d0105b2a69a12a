"""Development server.

Starts a pounce ASGI server with a live handler object.
"""


def run_dev_server(app: object, host: str, port: int) -> None:
    """Start a single-worker pounce server for *app*.

    Pounce's ``run()`` takes an import string, but the CLI builds the
    handler at startup from a mapping file, so ``pounce.Server`` is used
    directly with the ASGI callable.  The lookup table is fixed for the
    life of the process; restart to pick up mapping changes.

    Args:
        app: ASGI callable (usually a ``MapHandler``).
        host: Bind host address.
        port: Bind port number.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(host=host, port=port, workers=1)
    server = Server(config, app)
    server.run()
