"""Reference Router."""

from fastapi import APIRouter, Depends

from waggle.application.reference.queries import ListReferencesQuery
from waggle.domain.enums import ReferenceKind
from waggle.presentation.http.schemas.reference import ReferenceItemResponse
from waggle.setup.dependencies import get_list_references_query

router = APIRouter()


@router.get(
    "/{kind}",
    response_model=list[ReferenceItemResponse],
    summary="참조 데이터 목록",
)
async def list_references(
    kind: ReferenceKind,
    query: ListReferencesQuery = Depends(get_list_references_query),
) -> list[ReferenceItemResponse]:
    items = await query.execute(kind)
    return [ReferenceItemResponse.model_validate(item) for item in items]
