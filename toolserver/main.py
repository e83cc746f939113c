"""Process entry — logging, signal-driven shutdown, exit codes."""
import asyncio
import logging
import os
import signal
import sys

from .config import settings

logger = logging.getLogger(__name__)


def _setup_logging():
    # basicConfig writes to stderr; stdout belongs to the protocol
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def _shutdown(sig):
    """Exit on SIGINT/SIGTERM.

    The stdio reader blocks in a worker thread that cancellation cannot
    interrupt while the client holds stdin open, so the process ends here.
    """
    logger.info(f"Received {sig.name}, closing stdio transport")
    logging.shutdown()
    os._exit(0)


async def main():
    """Build the server and serve on stdio until stdin closes or a signal arrives."""
    from .server import ToolServer

    try:
        server = ToolServer(settings)
    except Exception as e:
        logger.error(f"Failed to start MCP server: {e}", exc_info=True)
        sys.exit(1)

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _shutdown, sig)
        except NotImplementedError:
            # Windows: SIGINT still arrives as KeyboardInterrupt
            pass

    await server.run()


def run():
    _setup_logging()
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.error(f"Unhandled error: {e}", exc_info=True)
        sys.exit(1)
    sys.exit(0)
