from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from veritas_lens.api.analysis_api import router as analysis_router, validation_exception_handler
from veritas_lens.core.config import CORS_ORIGINS, BACKEND_HOST, BACKEND_PORT

app = FastAPI(title="Veritas Lens AI Server")

# Allow requests from the frontend; defaults to all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.include_router(analysis_router, tags=["Claim Analysis"])

@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Veritas Lens AI Server is running!"


if __name__ == "__main__":
    import uvicorn

    print(f"Veritas Lens AI Server is running at http://localhost:{BACKEND_PORT}")
    uvicorn.run(app, host=BACKEND_HOST, port=BACKEND_PORT)
