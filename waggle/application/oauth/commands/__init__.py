"""OAuth Commands."""

from waggle.application.oauth.commands.authorize import OAuthAuthorizeInteractor
from waggle.application.oauth.commands.callback import OAuthCallbackInteractor

__all__ = ["OAuthAuthorizeInteractor", "OAuthCallbackInteractor"]
