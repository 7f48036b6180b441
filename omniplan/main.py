import logging

import uvicorn

from omniplan.api.api_run import app
from omniplan.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from omniplan.utilities.network import server_urls


if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    urls = server_urls(APP_HOST, APP_PORT)
    print(f"Uvicorn running on {urls[0]} (Press CTRL+C to quit)")
    # Also show the LAN-accessible URL for other devices on the same network
    for url in urls[1:]:
        print(f"Accessible from other devices at: {url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
