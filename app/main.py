from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from config import APP_HOST, APP_NAME, APP_PORT, APP_VERSION, CORS_ORIGINS, DEBUG
from responses.error import bad_request_error
from routes import (
    system_routes,
    owner_routes,
    property_routes,
    room_routes,
    tenant_routes,
    staff_routes,
    payment_routes,
    service_request_routes,
    feedback_routes,
)
from utils.logging import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)

app = FastAPI(title=APP_NAME, version=APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.info("request_rejected", path=request.url.path, errors=len(errors))
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        return bad_request_error(f"Invalid value for {field}: {first.get('msg')}")
    return bad_request_error("Malformed request body")


app.include_router(system_routes.router)
app.include_router(owner_routes.router)
app.include_router(property_routes.router)
app.include_router(room_routes.router)
app.include_router(tenant_routes.router)
app.include_router(staff_routes.router)
app.include_router(payment_routes.router)
app.include_router(service_request_routes.router)
app.include_router(feedback_routes.router)


if __name__ == "__main__":
    uvicorn.run("main:app", host=APP_HOST, port=APP_PORT, reload=DEBUG)
