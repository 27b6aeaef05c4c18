import logging

import uvicorn

from .core.config import settings
from .main_api import app


def main():
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("\n" + "="*50)
    print("🚀 Launching Resume Mailer API")
    print("="*50)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
