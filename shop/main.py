# shop/main.py
import uvicorn

from shop.api import create_app
from shop.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()

if __name__ == "__main__":
    logger.info("Starting shop gateway on :8000")
    uvicorn.run(app, host="0.0.0.0", port=8000)
