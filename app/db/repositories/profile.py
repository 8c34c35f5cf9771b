"""Profile repository: the single display-name row."""

from sqlmodel import Session

from app.models.profile import PROFILE_ROW_ID, Profile


class ProfileRepository:
    """Implements :class:`app.workout.stores.ProfileStore`."""

    def __init__(self, session: Session):
        self.session = session

    def get_or_create(self) -> Profile:
        profile = self.session.get(Profile, PROFILE_ROW_ID)
        if profile:
            return profile
        profile = Profile(id=PROFILE_ROW_ID)
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def get_display_name(self) -> str:
        return self.get_or_create().display_name

    def set_display_name(self, name: str) -> str:
        profile = self.get_or_create()
        profile.display_name = name.strip()
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile.display_name
