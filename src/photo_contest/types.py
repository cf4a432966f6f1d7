"""
photo_contest.types — Participant identity records
==================================================

The identity/contact record a participant is created from. Contact
details arrive already validated; the engine only uses them to
address its status lines.

    >>> ParticipantIdentity(name="Georgy", email="g@mail.ru").notification_prefix
    'Notification for Georgy was sent to g@mail.ru: '
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ParticipantIdentity(BaseModel):
    """Name and contact details of a photographer.

    Fields
    ------
    name : str
        Display name, e.g. "Georgy".
    email : str or None
        Contact email, e.g. "g@mail.ru".
    phone : str or None
        Contact phone number, e.g. "89224224421".
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_contact(cls, name: str, contact: str) -> "ParticipantIdentity":
        """Build an identity from a single contact that is either an email or a phone."""
        if "@" in contact:
            return cls(name=name, email=contact)
        return cls(name=name, phone=contact)

    @property
    def contacts(self) -> List[str]:
        return [c for c in (self.email, self.phone) if c is not None]

    @property
    def notification_prefix(self) -> str:
        """Prefix for status lines addressed to this participant."""
        if not self.contacts:
            return f"Notification for {self.name}: "
        return f"Notification for {self.name} was sent to {' and '.join(self.contacts)}: "
