from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional

from ipnodes.config import ServiceConfig
from ipnodes.placement import AddressValidationError, AddressValidator
from ipnodes.server.app_core import NodeServiceApp
from ipnodes.storage import NodeConflictError, StorageError

import logging

# ============================================================
# LOGGING
# ============================================================

logger = logging.getLogger("ipnodes.server")

# ============================================================
# Models
# ============================================================

class NodeCreateRequest(BaseModel):
    name: str = ""
    ip: Optional[str] = None


class PositionModel(BaseModel):
    x: float
    y: float
    z: float


class NodeResponse(BaseModel):
    id: str
    name: str
    ip: str
    position: PositionModel


class IPResponse(BaseModel):
    ip: str


# ============================================================
# Client Address
# ============================================================

def resolve_client_address(request: Request) -> str:
    """
    Best-effort client address as seen through a reverse proxy.

    X-Real-IP wins, then the first X-Forwarded-For entry, then the
    socket peer. The result is NOT validated.
    """

    ip = request.headers.get("x-real-ip", "").strip()

    if not ip:
        forwarded = request.headers.get("x-forwarded-for", "")
        if forwarded:
            ip = forwarded.split(",")[0].strip()

    if not ip and request.client is not None:
        ip = request.client.host or ""

    return ip


# ============================================================
# Error Responses
# ============================================================

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return _error(405, "Method not allowed")
    return _error(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error(400, f"Invalid request body: {exc.errors()}")


# ============================================================
# v1 Routes
# ============================================================

router = APIRouter(prefix="/v1")


@router.get("/nodes", response_model=list[NodeResponse])
def list_nodes(request: Request):
    store = request.app.state.store
    return [node.to_dict() for node in store.list_nodes()]


@router.post("/nodes", response_model=NodeResponse)
def create_node(body: NodeCreateRequest, request: Request):
    store = request.app.state.store
    raw_ip = body.ip or resolve_client_address(request)

    try:
        node = store.create_node(body.name, raw_ip)

    except AddressValidationError as e:
        logger.info("[CREATE NODE] Invalid IP address | ip=%s error=%s", raw_ip, e)
        raise HTTPException(status_code=400, detail=f"Invalid IP address: {e}")

    except NodeConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))

    except StorageError as e:
        logger.error("[CREATE NODE] Persist failed | ip=%s", raw_ip)
        raise HTTPException(status_code=500, detail=f"Failed to create node: {e}")

    except Exception:
        logger.exception("[CREATE NODE] Execution failed")
        raise HTTPException(status_code=500, detail="Internal error")

    return node.to_dict()


@router.get("/ip", response_model=IPResponse)
def client_ip(request: Request):
    raw_ip = resolve_client_address(request)

    try:
        ip = request.app.state.validator.validate(raw_ip)
    except AddressValidationError as e:
        logger.info("[CLIENT IP] Invalid IP from request | ip=%s error=%s", raw_ip, e)
        raise HTTPException(status_code=400, detail=f"Invalid IP address: {e}")

    return {"ip": ip}


# ============================================================
# FastAPI App
# ============================================================

def create_app(config: Optional[ServiceConfig] = None) -> FastAPI:
    config = config or ServiceConfig.from_env()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    application = FastAPI(title="ipnodes", version="1.0")

    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)

    application.state.config = config
    application.state.store = NodeServiceApp.create(config)
    application.state.validator = AddressValidator()

    @application.get("/health")
    def health():
        return {
            "status": "ok",
            "nodes": len(application.state.store),
        }

    application.include_router(router)

    logger.info(
        "[SERVER] App ready | storage=%s | origins=%s",
        config.storage_path or "memory",
        ",".join(config.cors_origins),
    )

    return application


def main():
    import uvicorn

    config = ServiceConfig.from_env()
    application = create_app(config)

    logger.info("[SERVER] Listening on http://%s:%d", config.host, config.port)
    uvicorn.run(application, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
