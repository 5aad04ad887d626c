import logging
import sys
import uvicorn
from skillmatch.core.config import settings

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=settings.LOG_LEVEL.upper(),
    handlers=[logging.StreamHandler(sys.stdout)]
)

def main():
    uvicorn.run("skillmatch.main:app", host="0.0.0.0", port=settings.PORT, log_config=None)

if __name__ == '__main__':
    main()
