import logging

import uvicorn
from madfood.api.api_run import app
from madfood.utilities.config import APP_HOST, APP_NAME, APP_PORT, LOG_LEVEL
from madfood.utilities.network import get_local_ip, server_urls


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    local_url, lan_url = server_urls(APP_PORT, get_local_ip())
    print(f"{APP_NAME} running on {local_url} (Press CTRL+C to quit)")
    # LAN URL for phones on the same network
    if lan_url:
        print(f"Accessible from other devices at: {lan_url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
