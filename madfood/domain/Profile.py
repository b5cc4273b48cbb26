"""Profile domain entity: display name and text reminder settings."""
from typing import Optional
from madfood.utilities.text import as_flag, optional_text


class Profile:
    def __init__(self, display_name: Optional[str] = None, phone_number: Optional[str] = None,
                 text_reminders_enabled: bool = False, email: str = ""):
        self.email = email
        self.display_name = display_name
        self.phone_number = phone_number
        self.text_reminders_enabled = text_reminders_enabled

    def __str__(self) -> str:
        return f"{self.display_name or '-'} <{self.email}>"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Profile(
            email=optional_text(d.get("email")) or "",
            display_name=optional_text(d.get("display_name")),
            phone_number=optional_text(d.get("phone_number")),
            text_reminders_enabled=as_flag(d.get("text_reminders_enabled")),
        )

    def to_dict(self):
        return {
            "email": self.email,
            "display_name": self.display_name,
            "phone_number": self.phone_number,
            "text_reminders_enabled": self.text_reminders_enabled,
        }
