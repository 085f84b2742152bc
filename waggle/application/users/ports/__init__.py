"""User ports."""

from waggle.application.users.ports.user_gateway import UserCommandGateway, UserQueryGateway

__all__ = ["UserCommandGateway", "UserQueryGateway"]
