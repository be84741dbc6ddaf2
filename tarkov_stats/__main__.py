"""Application entry point: ``python -m tarkov_stats``."""

import uvicorn

from tarkov_stats.core import get_global_settings

if __name__ == "__main__":
    settings = get_global_settings()
    uvicorn.run(
        "tarkov_stats.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
