from typing import Final

# Keys of the persisted key/value collections
USERS_KEY: Final[str] = "users_list"
CURRENT_USER_KEY: Final[str] = "current_user"
LAST_RESET_KEY: Final[str] = "last_reset_date"
FAMILIES_KEY: Final[str] = "families"
MEALS_KEY: Final[str] = "meals"
AUTH_ACCOUNTS_KEY: Final[str] = "auth_accounts"
AUTH_SESSION_KEY: Final[str] = "auth_session"

FALLBACK_USER_NAME: Final[str] = "User"
INVITE_CODE_ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
MAX_INVITE_CODE_ATTEMPTS: Final[int] = 50

MIN_SCORE: Final[int] = 1
MAX_SCORE: Final[int] = 5
RATING_LABELS: Final[dict[int, str]] = {
    1: "I hate it, never again",
    2: "Don't like",
    3: "It's okay",
    4: "I like it",
    5: "Love it, remake it",
}

MAX_ACTIVITY_EVENTS: Final[int] = 300
