# engine/state.py
import logging
from typing import Callable, List, Optional, TypeVar

from ..config import PROFILES_PATH
from ..data_model import Profile
from .storage import StorageResult, load_profiles, save_profiles

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProfileStore:
    """Owns every profile and keeps the storage file in sync with them.

    Profiles returned by the store are the live objects it persists, so an
    in-place edit is written out by the next save. Storage failures never
    raise: a failed load leaves the store empty and a failed save leaves the
    file stale. Either way ``last_error`` is set and ``on_error`` is called.
    """

    def __init__(
        self,
        storage_path: Optional[str] = None,
        on_error: Optional[Callable[[str], None]] = None,
    ):
        self.storage_path = str(storage_path or PROFILES_PATH)
        self.on_error = on_error
        self.last_error: Optional[str] = None
        self._profiles: List[Profile] = self.load()

    def load(self) -> List[Profile]:
        result = load_profiles(self.storage_path)
        self._record(result)
        return result.profiles

    def get_profiles(self) -> List[Profile]:
        return list(self._profiles)

    def list_names(self) -> List[str]:
        return [profile.name for profile in self._profiles]

    def find_profile_by_name(self, name: str) -> Optional[Profile]:
        for profile in self._profiles:
            if profile.matches_name(name):
                return profile
        return None

    def add_profile(self, profile: Profile) -> None:
        self._profiles.append(profile)
        self.save()

    def delete_profile(self, profile: Profile) -> None:
        for index, existing in enumerate(self._profiles):
            if existing is profile:
                del self._profiles[index]
                break
        else:
            if profile in self._profiles:
                self._profiles.remove(profile)
        self.save()

    def save_profile(self, profile: Profile) -> None:
        """Replace the profile with the same name (any case) or append it."""
        for index, existing in enumerate(self._profiles):
            if existing.matches_name(profile.name):
                self._profiles[index] = profile
                break
        else:
            self._profiles.append(profile)
        self.save()

    def with_profile(self, name: str, mutator: Callable[[Profile], T]) -> T:
        profile = self.find_profile_by_name(name)
        if profile is None:
            raise KeyError(name)
        result = mutator(profile)
        self.save()
        return result

    def save(self) -> bool:
        result = save_profiles(self.storage_path, self._profiles)
        self._record(result)
        return result.ok

    def _record(self, result: StorageResult) -> None:
        if result.ok:
            self.last_error = None
            return
        self.last_error = result.error
        if self.on_error is not None:
            self.on_error(result.error or "")
