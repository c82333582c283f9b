from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mcp.server.fastmcp import FastMCP

from app.config import ALLOWED_ORIGINS, BASE_URL
from app.logger import setup_logging
from app.mcp_handlers import register_mcp
from app.routes import register_api_routes

setup_logging()

# =====================================================
# 1) FastAPI app
# =====================================================
app = FastAPI(title="Fruits Catalog")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =====================================================
# 2) MCP Server
# =====================================================
mcp = FastMCP(
    name="fruits-mcp",
    sse_path="/mcp/sse",
    message_path="/mcp/messages/"
)

register_mcp(mcp)


@app.get("/mcp")
async def mcp_info_handler():
    """MCP server info"""
    return {
        "name": "fruits-mcp",
        "version": "1.0.0",
        "baseUrl": BASE_URL,
        "protocols": ["sse"],
        "endpoints": {
            "sse": "/mcp/sse",
            "messages": "/mcp/messages/"
        }
    }

# =====================================================
# 3) API routes
# =====================================================
register_api_routes(app)

# =====================================================
# 4) MCP transport, mounted last so API routes match first
# =====================================================
app.mount("/", mcp.sse_app())


if __name__ == "__main__":
    import uvicorn, os
    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
