"""Run the PrepHub API with uvicorn.

PORT defaults to 3000. DEBUG=true turns on auto-reload and binds to
loopback only.
"""

import os

import uvicorn

from prephub.core.config import get_settings


def main() -> None:
    settings = get_settings()
    port = int(os.environ.get("PORT", 3000))
    host = os.environ.get("HOST") or ("127.0.0.1" if settings.debug else "0.0.0.0")
    uvicorn.run(
        "prephub:app",
        host=host,
        port=port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
