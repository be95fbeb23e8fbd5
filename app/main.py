import uvicorn
from dotenv import load_dotenv

from server import server

load_dotenv()

server_app = server.handler


def main():
    """Run the API server."""
    uvicorn.run("main:server_app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
