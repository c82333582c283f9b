from mcp.server.fastmcp import FastMCP

from .catalog import find_item, search_catalog
from .config import MIME_TYPE
from .signup import check_fields, submit_signup
from .widget import widget


def register_mcp(mcp: FastMCP):
    """MCP tool registration"""

    @mcp.resource(
        widget.template_uri,
        name=widget.identifier,
        title=widget.title,
        mime_type=MIME_TYPE,
    )
    def fruits_widget() -> str:
        return widget.html

    @mcp.tool(meta=widget.tool_meta())
    async def search_fruits(query: str = "") -> dict:
        """Search the fruits catalog by title"""
        results = search_catalog(query)
        return {
            "fruits": [item.to_dict() for item in results],
            "count": len(results),
            "message": f"{len(results)} fruits found"
        }

    @mcp.tool(meta=widget.tool_meta())
    async def get_fruit(fruitId: str) -> dict:
        """Show a single fruit card"""
        item = find_item(fruitId)
        if not item:
            return {"success": False, "message": "Fruit not found"}
        return {"success": True, "fruit": item.to_dict()}

    @mcp.tool()
    async def validate_signup(email: str = "", password: str = "") -> dict:
        """Check sign-up email and password fields"""
        return check_fields(email, password)

    @mcp.tool()
    async def sign_up(name: str = "", email: str = "", password: str = "") -> dict:
        """Submit the sign-up form"""
        return submit_signup(name, email, password)
