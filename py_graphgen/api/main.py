"""FastAPI main application."""

import logging
from functools import lru_cache
from typing import List, Literal

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .. import __version__
from ..config import settings
from ..core.augment import neighborhood_of_node
from ..core.exceptions import CapacityExceededError, InvalidParametersError
from ..core.graph_generator import GraphParams, PlanarGraph, generate, leaf_nodes
from ..core.graph_model import MARGIN

# Configure logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Planar Graph Generator API",
    description="Seeded point sets joined by crossing-free edges",
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class GraphGenerationRequest(BaseModel):
    """Request to generate a graph."""

    point_count: int = Field(settings.default_point_count, ge=1, le=settings.max_point_count,
                             description="Number of points to place")
    seed: float = Field(1, description="Seed for reproducible point placement")
    width: int = Field(settings.default_width, ge=2 * MARGIN, le=settings.max_field_size,
                       description="Field width")
    height: int = Field(settings.default_height, ge=2 * MARGIN, le=settings.max_field_size,
                        description="Field height")
    connectivity_control: int = Field(0, ge=0, le=100,
                                      description="Share of leaf nodes given an extra edge")
    strategy: Literal["neighborhood", "boundary_walk"] = Field(
        "neighborhood", description="Leaf augmentation strategy"
    )

    def to_params(self) -> GraphParams:
        return GraphParams(self.point_count, self.seed, self.width, self.height,
                           self.connectivity_control, self.strategy)


class NeighborhoodRequest(GraphGenerationRequest):
    """Request for the triangulation neighborhood of one node."""

    node_id: str = Field(..., description="Id of the node to inspect")


class NodeModel(BaseModel):
    id: str
    group: int
    x: float
    y: float


class EdgeModel(BaseModel):
    source: str
    target: str
    value: float


class GraphResponse(BaseModel):
    """Generated graph for rendering."""

    nodes: List[NodeModel]
    edges: List[EdgeModel]
    leaf_count: int
    isolated_count: int


class NeighborhoodResponse(BaseModel):
    node_id: str
    neighborhood: List[NodeModel]


@lru_cache(maxsize=settings.cache_size)
def _cached_graph(params: GraphParams) -> PlanarGraph:
    """Generation is deterministic, so results are memoized per parameter tuple."""
    return generate(
        *params,
        max_attempts=settings.max_attempts_per_point,
        boundary_walk_neighbors=settings.boundary_walk_neighbors,
    )


def _graph_or_422(request: GraphGenerationRequest) -> PlanarGraph:
    try:
        return _cached_graph(request.to_params())
    except (CapacityExceededError, InvalidParametersError) as e:
        logger.warning("Graph generation rejected", error=str(e))
        raise HTTPException(status_code=422, detail=str(e))


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Planar Graph Generator API",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/graphs/generate", response_model=GraphResponse)
def generate_graph(request: GraphGenerationRequest):
    """Generate nodes and edges for the given parameters."""
    logger.info("Graph generation requested", request=request.model_dump())

    graph = _graph_or_422(request)
    data = graph.to_dict()

    return GraphResponse(
        nodes=data["nodes"],
        edges=data["edges"],
        leaf_count=len(leaf_nodes(graph)),
        isolated_count=len(graph.isolated),
    )


@app.post("/graphs/neighborhood", response_model=NeighborhoodResponse)
def node_neighborhood(request: NeighborhoodRequest):
    """Triangulation neighborhood of one node, for highlighting on click."""
    graph = _graph_or_422(request)

    try:
        neighborhood = neighborhood_of_node(graph.nodes, request.node_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Node not found")

    return NeighborhoodResponse(
        node_id=request.node_id,
        neighborhood=[node.to_dict() for node in neighborhood],
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
