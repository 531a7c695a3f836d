from dotenv import load_dotenv
import uvicorn

load_dotenv()

from src.config import get_config


if __name__ == "__main__":
    config = get_config()
    uvicorn.run(
        "src.main:app",
        host=config.server.host,
        port=config.server.port,
        log_level=config.logging.level.lower(),
    )
