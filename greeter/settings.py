from pydantic import BaseModel, Field


class Settings(BaseModel):
    # An empty host binds every local interface.
    host: str = ""
    port: int = Field(default=8080, ge=0, le=65535)
    log_level: str = "warning"
