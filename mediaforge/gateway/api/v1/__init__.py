from mediaforge.gateway.api.v1.documentation import router as documentation_router
from mediaforge.gateway.api.v1.files import router as files_router
from mediaforge.gateway.api.v1.speech import router as speech_router
from mediaforge.gateway.api.v1.video import router as video_router
from mediaforge.gateway.api.v1.ws import router as ws_router

__all__ = ["routers"]
routers = [speech_router, video_router, files_router, documentation_router, ws_router]
