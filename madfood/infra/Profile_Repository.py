from typing import Any, Mapping, Optional

from madfood.domain.Profile import Profile
from madfood.infra.json_store import JsonStore
from madfood.infra.paths import PROFILE_FILE
from madfood.utilities.text import as_flag, optional_text


class ProfileRepository:
    """Single household profile document."""

    def __init__(self, store: JsonStore):
        self.store = store

    def get(self) -> Optional[Profile]:
        data = self.store.load_document(PROFILE_FILE)
        return Profile.from_dict(data) if data else None

    def upsert(self, payload: Mapping[str, Any]) -> Profile:
        with self.store.lock:
            current = self.store.load_document(PROFILE_FILE)
            current.update({
                "display_name": optional_text(payload.get("display_name")),
                "phone_number": optional_text(payload.get("phone_number")),
                "text_reminders_enabled": as_flag(payload.get("text_reminders_enabled")),
            })
            if "email" in payload:
                current["email"] = optional_text(payload.get("email")) or ""
            self.store.save(PROFILE_FILE, current)
        return Profile.from_dict(current)
