"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from localelend import obs
from localelend.api import listings, ops, trust
from localelend.domain.listings.geo import InvalidCoordinates
from localelend.domain.listings.service import ItemRepository
from localelend.domain.trust.models import TrustInputError
from localelend.domain.trust.service import InvalidRecord, TrustRepository
from localelend.infra.memory import InMemoryItemRepository, InMemoryUserRepository
from localelend.obs import metrics as obs_metrics
from localelend.settings import settings

logger = logging.getLogger(__name__)


async def _trust_input_error(request: Request, exc: TrustInputError) -> JSONResponse:
	obs_metrics.inc_trust_reject(exc.reason)
	return JSONResponse(status_code=422, content={"detail": exc.reason})


async def _invalid_coordinates(request: Request, exc: InvalidCoordinates) -> JSONResponse:
	return JSONResponse(status_code=422, content={"detail": exc.reason})


async def _invalid_record(request: Request, exc: InvalidRecord) -> JSONResponse:
	return JSONResponse(status_code=422, content={"detail": exc.reason})


def create_app(
	*,
	user_repository: Optional[TrustRepository] = None,
	item_repository: Optional[ItemRepository] = None,
) -> FastAPI:
	app = FastAPI(title="Locale Lend API")
	app.state.user_repository = user_repository if user_repository is not None else InMemoryUserRepository()
	app.state.item_repository = item_repository if item_repository is not None else InMemoryItemRepository()

	obs.init(app)

	app.add_exception_handler(TrustInputError, _trust_input_error)
	app.add_exception_handler(InvalidCoordinates, _invalid_coordinates)
	app.add_exception_handler(InvalidRecord, _invalid_record)

	app.include_router(ops.router, tags=["ops"])
	app.include_router(trust.router, tags=["trust"])
	app.include_router(listings.router, tags=["listings"])

	logger.info("application configured", extra={"environment": settings.environment})
	return app


app = create_app()
