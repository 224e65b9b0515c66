"""
Application FastAPI de HexaMessage.

Initialise l'application web avec le Container DI, déclare la traduction
des erreurs du domaine et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from .. import __version__
from ..container import Container
from ..core.exceptions import ValidationError
from ..logging_config import configure_logging
from .routes.hello import router as hello_router
from .routes.messages import router as messages_router


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Erreur de validation métier -> 400 Bad Request."""
    logger.info("Requete refusee", path=request.url.path, reason=exc.message)
    return JSONResponse(status_code=400, content={"detail": exc.message})


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application FastAPI.

    Args:
        container: Container à utiliser (un Container neuf est créé au démarrage si None)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Attache le Container DI et configure le logging au démarrage.

        Couvre aussi les processus lancés directement par uvicorn (--reload),
        qui n'exécutent pas main().
        """
        if getattr(app.state, "container", None) is None:
            app.state.container = Container()
        configure_logging(app.state.container.config())
        logger.info("Démarrage de l'API HexaMessage", version=__version__)
        yield
        logger.info("Arrêt de l'API HexaMessage")

    app = FastAPI(title="HexaMessage", version=__version__, lifespan=lifespan)
    app.state.container = container

    app.add_exception_handler(ValidationError, validation_error_handler)

    # Routes
    app.include_router(hello_router)
    app.include_router(messages_router)
    return app


app = create_app()
