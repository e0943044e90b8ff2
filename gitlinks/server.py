"""FastAPI server exposing remote resolution over HTTP."""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .config import load_remotes_config
from .remotes import RemoteProviderRegistry, parse_remote_url
from .types import LineRange

app = FastAPI(
    title="gitlinks API",
    description="Resolve git remotes into hosting web links",
    version="0.1.0",
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_registry() -> RemoteProviderRegistry:
    registry = getattr(app.state, "registry", None)
    if registry is None:
        registry = RemoteProviderRegistry(load_remotes_config())
        app.state.registry = registry
    return registry


# Request/Response models
class ResolveRequest(BaseModel):
    remoteUrl: str
    file: str | None = None
    branch: str | None = None
    sha: str | None = None
    startLine: int | None = None
    endLine: int | None = None


class ResolveResponse(BaseModel):
    provider: dict
    links: dict[str, str]


class ReloadResponse(BaseModel):
    providers: int


# Endpoints
@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/api/remotes/resolve", response_model=ResolveResponse)
async def api_resolve(request: ResolveRequest):
    """Resolve a remote URL and build its links."""
    try:
        registry = get_registry()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e))

    try:
        if parse_remote_url(request.remoteUrl) is None:
            raise ValueError(f"Unrecognized remote URL: {request.remoteUrl}")

        line_range = None
        if request.startLine is not None:
            line_range = LineRange(start=request.startLine, end=request.endLine)

        provider = registry.resolve_url(request.remoteUrl)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to resolve remote: {e}")

    if provider is None:
        raise HTTPException(status_code=404, detail=f"No provider found for remote: {request.remoteUrl}")

    links = provider.get_links(
        file_name=request.file,
        branch=request.branch,
        sha=request.sha,
        line_range=line_range,
    )
    return ResolveResponse(provider=provider.to_dict(), links=links)


@app.post("/api/remotes/reload", response_model=ReloadResponse)
async def api_reload():
    """Reload user-defined remotes from the config file."""
    try:
        configs = load_remotes_config()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e))

    registry = getattr(app.state, "registry", None)
    if registry is None:
        registry = RemoteProviderRegistry(configs)
        app.state.registry = registry
    else:
        registry.reload(configs)
    return ReloadResponse(providers=len(registry.table))
