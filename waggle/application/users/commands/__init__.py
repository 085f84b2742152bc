"""User Commands."""

from waggle.application.users.commands.delete_user import DeleteUserInteractor
from waggle.application.users.commands.update_profile import UpdateProfileInteractor

__all__ = ["DeleteUserInteractor", "UpdateProfileInteractor"]
