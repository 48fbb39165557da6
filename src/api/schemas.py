"""API request/response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, Field


# === Request Schemas ===


class GiveRequest(BaseModel):
    """아이템 지급 요청"""

    key: str = Field(..., description="아이템 key (예: item_medkit)")
    amount: int = Field(..., description="지급 수량 (양의 정수)")
    data: Optional[Any] = Field(None, description="스택 구분 속성")


class UseRequest(BaseModel):
    """아이템 사용 요청"""

    index: int = Field(..., description="인벤토리 스택 인덱스")


class RemoveRequest(BaseModel):
    """아이템 제거 요청"""

    index: int = Field(..., description="인벤토리 스택 인덱스")
    amount: int = Field(1, description="제거 수량")


class StackPayload(BaseModel):
    """교체용 스택 (저장소 형식)"""

    key: str
    amount: int
    data: Optional[Any] = None


class ReplaceRequest(BaseModel):
    """인벤토리 일괄 교체 요청"""

    stacks: list[StackPayload] = Field(default_factory=list)


# === Response Schemas ===


class ItemInfo(BaseModel):
    """아이템 정의 정보"""

    key: str
    name: str
    description: str
    usable: bool = False


class ItemListResponse(BaseModel):
    """아이템 카탈로그 응답"""

    items: list[ItemInfo] = []


class StackInfo(BaseModel):
    """인벤토리 스택 정보 (표시 이름은 data 반영)"""

    index: int
    key: str
    amount: int
    data: Optional[Any] = None
    name: str
    description: str


class InventoryResponse(BaseModel):
    """액터 인벤토리 응답"""

    actor_id: str
    stacks: list[StackInfo] = []
    total_amount: int = 0


class ActionResponse(BaseModel):
    """인벤토리 변경 응답"""

    success: bool
    action: str
    message: str
    inventory: Optional[InventoryResponse] = None


class ErrorResponse(BaseModel):
    """에러 응답"""

    success: bool = False
    error: str
    detail: Optional[str] = None
