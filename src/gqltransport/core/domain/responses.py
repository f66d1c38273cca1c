from dataclasses import dataclass, field

from gqltransport.core.constants import APPLICATION_JSON
from gqltransport.core.interfaces.model_bases import InternalDTO


@dataclass(frozen=True)
class ResponseEnvelope(InternalDTO):
    """Transport-agnostic response container.

    Decouples the encoder from FastAPI/Starlette ``Response``. Adapters in the
    transport layer map this to the framework's response type.
    """

    content: bytes
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    media_type: str = APPLICATION_JSON
