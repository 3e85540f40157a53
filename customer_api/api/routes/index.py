"""Index route — greeting at the API root."""

from fastapi import APIRouter

from customer_api.schemas.customer import MessageResponse

router = APIRouter(tags=["Hello World"])


@router.get("/", response_model=MessageResponse)
async def index():
    return MessageResponse(message="Hello World!")
