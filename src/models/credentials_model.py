from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional


@dataclass
class CredentialsModel:
    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: Optional[str] = field(default=None, repr=False)
    expiration: Optional[datetime] = None

    def update_from(self, other: "CredentialsModel") -> None:
        self.access_key_id = other.access_key_id
        self.secret_access_key = other.secret_access_key
        self.session_token = other.session_token
        self.expiration = other.expiration

    def is_expired(self, buffer: timedelta = timedelta(0)) -> bool:
        if self.expiration is None:
            return False
        return datetime.now(timezone.utc) >= (self.expiration - buffer)
