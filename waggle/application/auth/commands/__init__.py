"""Auth Commands."""

from waggle.application.auth.commands.complete_login import CompleteLoginInteractor
from waggle.application.auth.commands.exchange_temporary_token import (
    ExchangeTemporaryTokenInteractor,
)
from waggle.application.auth.commands.logout import LogoutInteractor
from waggle.application.auth.commands.reissue_access_token import ReissueAccessTokenInteractor

__all__ = [
    "CompleteLoginInteractor",
    "ExchangeTemporaryTokenInteractor",
    "LogoutInteractor",
    "ReissueAccessTokenInteractor",
]
