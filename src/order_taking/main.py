from __future__ import annotations

import uvicorn

from order_taking.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(
        "order_taking.bootstrap:create_asgi_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
    )


if __name__ == "__main__":
    main()
