from fastapi import FastAPI, exceptions
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from src.api import records
from src import database as db
import logging
from starlette.middleware.cors import CORSMiddleware

description = """
Substring search over registered database tables.
"""

origins = ["http://localhost", "http://localhost:3000"]

async def validation_exception_handler(request, exc):
    logging.error(f"The client sent invalid data!: {exc}")
    exc_json = exc.errors()

    response = {"detail": []}

    if len(exc_json) == 1:
        response['detail'] = f"{exc_json[0]['loc']}: {exc_json[0]['msg']}"
    else:
        for error in exc_json:
            response['detail'].append(f"{error['loc']}: {error['msg']}")

    return JSONResponse(response, status_code=422)

def create_app(engine=None, registry=None):
    """
    Builds the application.

    Parameters:
    - engine: the SQLAlchemy engine searches run on. Defaults to the one configured by DATABASE_URI.
    - registry (dict): table name to SearchableTable, owned by the caller.
    """

    app = FastAPI(
        title="Searchable Records",
        description=description,
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.engine = engine if engine is not None else db.get_engine()
    app.state.searchable_tables = registry if registry is not None else {}

    app.include_router(records.router)
    app.add_exception_handler(exceptions.RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)

    @app.get("/")
    async def root():
        return {"message": "Searchable Records", "tables": sorted(app.state.searchable_tables)}

    return app
