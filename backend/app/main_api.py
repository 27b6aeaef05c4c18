import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.cors import CORSMiddleware

from .api.routes.files import router as files_router
from .api.routes.resume import router as resume_router
from .core.config import Settings, settings as default_settings
from .core.errors import ResumeMailerError
from .services.context_store import InMemoryContextStore, RedisContextStore
from .services.cover_letter_service import CoverLetterAssembler
from .services.generation import GenerationClient
from .services.record_store import RecordStore
from .services.resume_service import ResumeAssembler

logger = logging.getLogger(__name__)


def build_context_store(settings: Settings):
    if settings.context_backend == "memory":
        return InMemoryContextStore(ttl_seconds=settings.context_ttl_seconds)

    from .core.redis import get_redis_client

    return RedisContextStore(get_redis_client(settings.redis_url), ttl_seconds=settings.context_ttl_seconds)


def create_app(
    settings: Settings = default_settings,
    generation_client: GenerationClient | None = None,
    object_store=None,
    context_store=None,
    record_store: RecordStore | None = None,
) -> FastAPI:
    """
    Wire the pipeline collaborators onto `app.state`.
    Anything not passed in is built from settings.
    """
    if generation_client is None:
        from .core.llm import get_llm

        generation_client = GenerationClient(get_llm(settings), timeout=settings.generation_timeout_seconds)
    if object_store is None:
        from .services.object_store import S3ObjectStore

        object_store = S3ObjectStore.from_settings(settings)
    if context_store is None:
        context_store = build_context_store(settings)
    if record_store is None:
        record_store = RecordStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        redis_client = getattr(context_store, "redis_client", None)
        if redis_client is not None:
            await redis_client.aclose()

    app = FastAPI(
        title="Resume Mailer API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.object_store = object_store
    app.state.context_store = context_store
    app.state.record_store = record_store
    app.state.resume_assembler = ResumeAssembler(generation_client, record_store, context_store)
    app.state.cover_letter_assembler = CoverLetterAssembler(generation_client, context_store)

    app.include_router(resume_router)
    app.include_router(files_router)

    @app.exception_handler(ResumeMailerError)
    async def handle_domain_error(request: Request, exc: ResumeMailerError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        errors = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        return JSONResponse(status_code=400, content={"message": f"Invalid request: {errors}"})

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Hey this is my API running 🥳"

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
