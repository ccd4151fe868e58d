from guestportal.web.routers.login import router as login_router
from guestportal.web.routers.pages import router as pages_router

__all__ = [
    "login_router",
    "pages_router",
]
