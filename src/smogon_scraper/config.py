"""Resolve the user id and session cookie from arguments or the environment."""

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

USER_ID_ENV = "USER_ID"
SESSION_ENV = "SMOGON_SESSION"
DEFAULT_OUTPUT = "contributions.json"


@dataclass(frozen=True)
class Settings:
    user_id: Optional[str]
    session_cookie: Optional[str]
    output: str = DEFAULT_OUTPUT

    def missing(self) -> List[str]:
        """Names of required settings that are still unset."""
        missing = []
        if not self.user_id:
            missing.append(USER_ID_ENV)
        if not self.session_cookie:
            missing.append(SESSION_ENV)
        return missing


def load_settings(
    user_id: Optional[str] = None,
    session_cookie: Optional[str] = None,
    output: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Explicit values win over the environment; empty strings count as unset."""
    env = os.environ if env is None else env
    return Settings(
        user_id=_clean(user_id) or _clean(env.get(USER_ID_ENV)),
        session_cookie=_clean(session_cookie) or _clean(env.get(SESSION_ENV)),
        output=output or DEFAULT_OUTPUT,
    )


def mask_secret(value: str) -> str:
    """Show only the first and last four characters of values longer than 8."""
    if len(value) > 8:
        return f"{value[:4]}...{value[-4:]}"
    return "***"


def check_env(env: Optional[Mapping[str, str]] = None) -> Tuple[List[str], bool]:
    """Return report lines for the required variables and whether all are set."""
    env = os.environ if env is None else env
    lines = []
    ok = True
    for key in (SESSION_ENV, USER_ID_ENV):
        value = _clean(env.get(key))
        if value:
            lines.append(f"{key}: {mask_secret(value)} ({len(value)} chars)")
        else:
            lines.append(f"{key}: NOT SET")
            ok = False
    return lines, ok


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None
