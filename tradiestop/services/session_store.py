"""
File-backed persistence of the logged-in session.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from tradiestop.models.user import Session

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Keeps the current Session in a JSON file between CLI invocations.

    A missing file means logged out. A file that cannot be read or no longer
    validates is logged, removed and treated as logged out.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Optional[Session]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return Session.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Failed to parse saved session {self.path}: {e}")
            self.clear()
            return None

    def save(self, session: Session) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = session.model_dump(
            by_alias=True, mode="json", exclude_none=True, exclude={"password"}
        )
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        try:
            self.path.chmod(0o600)
        except OSError as e:
            logger.warning(f"Could not restrict permissions of {self.path}: {e}")
        logger.debug(f"Session for {session.id} saved to {self.path}")

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        logger.debug(f"Session file {self.path} removed")

    def token(self) -> Optional[str]:
        session = self.load()
        return session.token if session else None
