from mfmhtml.schemas.nodes import MfmNode, NODE_TYPES, load_nodes
from mfmhtml.schemas.schemas import RenderConfig, RenderRequest, RenderResponse

__all__ = [
    "MfmNode", "NODE_TYPES", "load_nodes",
    "RenderConfig", "RenderRequest", "RenderResponse",
]
