"""Auth HTTP Schemas."""

from pydantic import BaseModel, Field


class ExchangeTokenRequest(BaseModel):
    """임시 토큰 교환 요청."""

    temporary_token: str = Field(..., description="로그인 redirect URL로 전달된 임시 토큰")


class AccessTokenBody(BaseModel):
    """Access 토큰 응답."""

    access_token: str = Field(..., description="Bearer access 토큰")
    token_type: str = Field(default="Bearer", description="토큰 타입")


class LogoutResponse(BaseModel):
    """로그아웃 응답."""

    message: str = Field(default="Successfully logged out", description="결과 메시지")
