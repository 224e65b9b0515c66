"""Route de salutation : expose HelloUseCase."""

from fastapi import APIRouter, Depends

from ...services.hello import HelloUseCase
from ..deps import get_hello_use_case
from ..schemas import HelloResponse

router = APIRouter()


@router.get("/hello", response_model=HelloResponse)
def hello(use_case: HelloUseCase = Depends(get_hello_use_case)) -> HelloResponse:
    """Retourne le résultat de la logique métier."""
    return HelloResponse(message=use_case.execute())
