from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

app = FastAPI(title="Hello Users", version="1.0.0")

HELLO_BODY = "Hello, World!"
METHOD_NOT_ALLOWED_BODY = "Method not allowed\n"


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    # Everything except 405 keeps the framework's default JSON error.
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    return PlainTextResponse(
        METHOD_NOT_ALLOWED_BODY,
        status_code=405,
        headers={"Allow": "GET"},
    )


@app.get("/")
def home() -> PlainTextResponse:
    return PlainTextResponse(HELLO_BODY)
