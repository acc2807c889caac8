from __future__ import annotations

import uvicorn

from codesearch.app import create_app
from codesearch.config import Config


def main() -> None:
    config = Config()
    uvicorn.run(create_app(config), host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
