from typing import Optional
from pydantic import BaseModel

class ResponseModel(BaseModel):
    """Error envelope; successful responses carry the bare entity or collection."""
    error: bool = True
    message: str = "error"
    trace_id: Optional[str] = None

    @staticmethod
    def fail(message: str = "error", trace_id: Optional[str] = None):
        body = {"error": True, "message": message}
        if trace_id is not None:
            body["trace_id"] = trace_id
        return body
