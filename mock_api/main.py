# mock_api/main.py
from mock_api.api import create_app
from mock_api.utils.settings import HOST, PORT
from mock_api.utils.logging import get_logger
import uvicorn

logger = get_logger(__name__)

app = create_app()

if __name__ == "__main__":
    logger.info(f"Lookup service starting on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
