# API endpoints and routers

from .lookup_endpoints import router as lookup_router
from .scan_endpoints import router as scan_router
from .learning_endpoints import router as learning_router
from .speech_endpoints import router as speech_router
from .config_endpoints import router as config_router

__all__ = [
    "lookup_router",
    "scan_router",
    "learning_router",
    "speech_router",
    "config_router",
]
