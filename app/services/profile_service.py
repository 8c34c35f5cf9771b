"""Display name service."""

from app.schemas.profile import ProfileResponse, ProfileUpdate
from app.workout.stores import ProfileStore


class ProfileService:
    def __init__(self, store: ProfileStore):
        self.store = store

    def get(self) -> ProfileResponse:
        return ProfileResponse(display_name=self.store.get_display_name())

    def update(self, data: ProfileUpdate) -> ProfileResponse:
        return ProfileResponse(display_name=self.store.set_display_name(data.display_name))
