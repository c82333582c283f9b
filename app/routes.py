from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from app.catalog import find_item, search_catalog
from app.signup import check_fields, submit_signup
from app.widget import widget


class FieldsRequest(BaseModel):
    email: str = ""
    password: str = ""


class SignUpRequest(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""


def register_api_routes(app):

    # Widget page
    @app.get("/", response_class=HTMLResponse)
    async def index():
        return widget.html

    router = APIRouter(prefix="/api", tags=["fruits"])

    # 1) Catalog search
    @router.get("/fruits")
    async def search_fruits_endpoint(query: str = Query("", description="Search text")):
        results = search_catalog(query)
        return {
            "fruits": [item.to_dict() for item in results],
            "count": len(results),
            "message": f"{len(results)} fruits found"
        }

    # 2) Detail card
    @router.get("/fruits/{fruit_id}")
    async def get_fruit_endpoint(fruit_id: str):
        item = find_item(fruit_id)
        if not item:
            raise HTTPException(status_code=404, detail="Fruit not found")
        return item.to_dict()

    # 3) Per-field validation while typing
    @router.post("/signup/validate")
    async def validate_signup_endpoint(payload: FieldsRequest):
        return check_fields(payload.email, payload.password)

    # 4) Sign-up submission
    @router.post("/signup")
    async def signup_endpoint(payload: SignUpRequest):
        return submit_signup(payload.name, payload.email, payload.password)

    app.include_router(router)
