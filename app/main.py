from dotenv import load_dotenv

load_dotenv()

# pylint: disable=wrong-import-position
from infrastructure.logging import get_module_logger  # noqa: E402
from server import server  # noqa: E402

server_app = server.handler
logger = get_module_logger()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    logger.info("application_starting")
    uvicorn.run(server_app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
